"""Building blocks for build_proposal.py: pricing, naming, Markdown, templates, PDF export."""
