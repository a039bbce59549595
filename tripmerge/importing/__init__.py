"""Account data import: preview generation with duplicate flags."""

from .preview import generate_preview_data, PreviewBuilder, SECTIONS

__all__ = ['generate_preview_data', 'PreviewBuilder', 'SECTIONS']
