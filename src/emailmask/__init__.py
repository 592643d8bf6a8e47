"""emailmask: partially obscure email addresses for display.

QUICK START:
    >>> from emailmask import mask_email
    >>> mask_email("ekaone3033@gmail.com")
    'ek********@gmail.com'
    >>> mask_email("contact@mail.google.com", mask_domain=True)
    'co*****@m***.g*****.com'

Reusable defaults, records and free text:
    >>> from emailmask import EmailMasker
    >>> masker = EmailMasker(visible_chars=1, mask_char="#")
    >>> masker.mask_text("write to admin@example.com")
    'write to a####@example.com'

Modules:
    - core: MaskOptions and mask_email
    - masker: EmailMasker for records and text
    - errors: Exceptions with user-friendly hints
    - cli: The ``emailmask`` command
"""

import logging

from emailmask.__version__ import __version__, __version_info__
from emailmask.core import MaskOptions, mask_email
from emailmask.errors import ConfigurationError, EmailMaskError, format_error
from emailmask.masker import EmailMasker

# Silence verbose logging by default
logging.getLogger("emailmask").setLevel(logging.WARNING)

__all__ = [
    "mask_email",
    "MaskOptions",
    "EmailMasker",
    "EmailMaskError",
    "ConfigurationError",
    "format_error",
    "__version__",
    "__version_info__",
]
