"""Reusable email masker.

``EmailMasker`` keeps a set of default options and applies ``mask_email``
to single values, dictionary records and free text.
"""

import logging
import re
from typing import Any, Dict, Iterable, List

from emailmask.core import MaskOptions, OptionsLike, mask_email, resolve_options
from emailmask.errors import ConfigurationError
from emailmask.utils import copy_with_nested_value, get_nested_value, has_nested_value

logger = logging.getLogger(__name__)


class EmailMasker:
    """Masks email addresses with a fixed set of default options.

    Attributes:
        options: The MaskOptions applied to every call.

    Example:
        >>> masker = EmailMasker(mask_domain=True)
        >>> masker.mask("user@gmail.com")
        'us**@g****.com'
        >>> masker.mask_record({"email": "user@gmail.com", "id": 7}, ["email"])
        {'email': 'us**@g****.com', 'id': 7}
    """

    EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+@-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

    def __init__(
        self, options: OptionsLike = None, strict: bool = False, **overrides: Any
    ):
        """Initialize the masker.

        Args:
            options: MaskOptions, a mapping of option names, or None.
            strict: Validate the options and raise on problems.
            **overrides: Individual option values applied on top of ``options``.

        Raises:
            ConfigurationError: If ``strict`` is set and the options are invalid.
        """
        self.options: MaskOptions = resolve_options(options, **overrides)

        if strict:
            errors = self.options.validate()
            if errors:
                raise ConfigurationError("Invalid mask options", errors)

        self._stats = {
            "records_processed": 0,
            "values_masked": 0,
            "values_unchanged": 0,
        }
        logger.debug(f"{self.__class__.__name__} initialized with {self.options}")

    def mask(self, email: Any, **overrides: Any) -> Any:
        """Mask a single value.

        Args:
            email: The value to mask.
            **overrides: Per-call option overrides.

        Returns:
            The masked address, or the value unchanged if it cannot be masked.
        """
        result = mask_email(email, self.options.merge(**overrides))

        if result is email or result == email:
            self._stats["values_unchanged"] += 1
        else:
            self._stats["values_masked"] += 1

        return result

    def mask_record(self, record: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
        """Mask the given fields of a record.

        Args:
            record: Record to mask. It is not modified.
            fields: Field names or dot-separated paths into nested dictionaries.

        Returns:
            A copy of the record with the listed fields masked.
        """
        result = dict(record)

        for field in fields:
            if field in result:
                if result[field] is not None:
                    result[field] = self.mask(result[field])
                continue

            if not has_nested_value(result, field):
                logger.debug(f"Field '{field}' not found in record, skipping")
                continue

            value = get_nested_value(result, field)
            if value is None:
                continue
            result = copy_with_nested_value(result, field, self.mask(value))

        self._stats["records_processed"] += 1
        return result

    def mask_records(
        self, records: Iterable[Dict[str, Any]], fields: Iterable[str]
    ) -> List[Dict[str, Any]]:
        """Mask the given fields in every record."""
        fields = list(fields)
        return [self.mask_record(record, fields) for record in records]

    def detect(self, text: str) -> List[str]:
        """Detect all email addresses in text."""
        if not text or not isinstance(text, str):
            return []
        return self.EMAIL_PATTERN.findall(text)

    def mask_text(self, text: Any) -> Any:
        """Mask every email address found in text.

        Addresses with several ``@`` signs are masked as a whole, split on the
        last one like ``mask_email``.

        Args:
            text: Free text, e.g. a log line or a message body.

        Returns:
            The text with each address replaced by its masked form.
        """
        if not text or not isinstance(text, str):
            return text

        return self.EMAIL_PATTERN.sub(lambda m: self.mask(m.group(0)), text)

    def get_stats(self) -> Dict[str, int]:
        """Get masking statistics.

        Returns:
            Dictionary with processing statistics.
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset processing statistics."""
        for key in self._stats:
            self._stats[key] = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.options!r})"
