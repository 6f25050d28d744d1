"""
Error types raised by the proposal build pipeline.

Every failure is fatal for a run; build_proposal.main() is the only place that
catches these, to print them on stderr and exit non-zero.
"""


class ProposalError(Exception):
    """Base class for all proposal build failures."""


class TemplateConfigError(ProposalError):
    """Missing template/partial files, broken template syntax, unknown helper."""


class InputDocumentError(ProposalError):
    """Input YAML or a referenced Markdown file is missing, unreadable or malformed."""


class PdfExportError(ProposalError):
    """Headless browser failed to launch, load the HTML, export, or timed out."""
