from .summary_pdf import generate_summary_pdf

__all__ = ["generate_summary_pdf"]
