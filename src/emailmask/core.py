"""Core email masking for emailmask.

This module contains the masking options and the ``mask_email`` function
that every other part of the package builds on.

Example:
    >>> mask_email("ekaone3033@gmail.com")
    'ek********@gmail.com'
    >>> mask_email("contact@mail.google.com", mask_domain=True)
    'co*****@m***.g*****.com'
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Mapping, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaskOptions:
    """Options controlling how an email address is masked.

    Attributes:
        mask_char: Filler used for every hidden character. A longer string is
            repeated once per hidden position.
        visible_chars: Number of leading local-part characters left visible.
        mask_domain: Whether to mask every domain label except the last one.
        viewable: If True, addresses are returned unmasked.
    """

    mask_char: str = "*"
    visible_chars: int = 2
    mask_domain: bool = False
    viewable: bool = False

    # camelCase spellings accepted by from_dict
    ALIASES = {
        "maskChar": "mask_char",
        "visibleChars": "visible_chars",
        "maskDomain": "mask_domain",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MaskOptions":
        """Build options from a mapping.

        Both ``mask_char`` and ``maskChar`` style keys are understood.
        Unknown keys and keys set to None are ignored.

        Args:
            data: Mapping of option names to values.

        Returns:
            A new MaskOptions instance; missing keys keep their defaults.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}

        for key, value in data.items():
            name = cls.ALIASES.get(key, key)
            if name not in known:
                logger.debug(f"Ignoring unknown mask option '{key}'")
                continue
            if value is None:
                continue
            values[name] = value

        return cls(**values)

    def merge(self, **overrides: Any) -> "MaskOptions":
        """Return a copy with the given fields replaced.

        Overrides set to None are skipped, so callers can forward optional
        arguments without checking them first.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)

    def validate(self) -> List[str]:
        """Check the options for values masking cannot use sensibly.

        Returns:
            List of validation error messages. Empty if valid.
        """
        errors = []

        if not isinstance(self.mask_char, str) or not self.mask_char:
            errors.append("'mask_char' must be a non-empty string")

        if isinstance(self.visible_chars, bool) or not isinstance(
            self.visible_chars, int
        ):
            errors.append("'visible_chars' must be an integer")
        elif self.visible_chars < 0:
            errors.append(
                f"'visible_chars' must be zero or positive, got {self.visible_chars}"
            )

        for name in ("mask_domain", "viewable"):
            if not isinstance(getattr(self, name), bool):
                errors.append(f"'{name}' must be True or False")

        return errors


OptionsLike = Union[MaskOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None, **overrides: Any) -> MaskOptions:
    """Turn ``None``, a mapping or a MaskOptions into MaskOptions.

    Args:
        options: Base options.
        **overrides: Field values applied on top of the base options.

    Returns:
        The resolved options.
    """
    if options is None:
        resolved = MaskOptions()
    elif isinstance(options, MaskOptions):
        resolved = options
    else:
        resolved = MaskOptions.from_dict(options)

    return resolved.merge(**overrides)


def _mask_label(label: str, mask_char: str) -> str:
    """Keep the first character of a domain label and mask the rest."""
    return label[:1] + mask_char * max(0, len(label) - 1)


def mask_email(email: Any, options: OptionsLike = None, **overrides: Any) -> Any:
    """Mask an email address for display.

    The local part keeps ``visible_chars`` leading characters and the rest is
    replaced by ``mask_char``. With ``mask_domain`` every domain label but the
    last keeps only its first character.

    Args:
        email: The value to mask. Anything that is not a non-empty string is
            returned as is.
        options: MaskOptions, a mapping of option names, or None for defaults.
        **overrides: Individual options (``mask_char``, ``visible_chars``,
            ``mask_domain``, ``viewable``) applied on top of ``options``.

    Returns:
        The masked address, or ``email`` unchanged when it is not a string,
        is empty, has no ``@``, or the options are viewable.

    Example:
        >>> mask_email("user@name@domain.com")
        'us*******@domain.com'
        >>> mask_email("test@example.com", {"visibleChars": 0})
        '****@example.com'
    """
    if not email or not isinstance(email, str):
        return email

    opts = resolve_options(options, **overrides)
    if opts.viewable:
        return email

    at_index = email.rfind("@")
    if at_index == -1:
        return email

    local = email[:at_index]
    domain = email[at_index + 1 :]

    # Negative counts behave like zero
    visible = max(0, min(opts.visible_chars, len(local)))
    masked_local = local[:visible] + opts.mask_char * (len(local) - visible)

    if opts.mask_domain:
        labels = domain.split(".")
        if len(labels) >= 2:
            masked = [_mask_label(label, opts.mask_char) for label in labels[:-1]]
            domain = ".".join(masked + [labels[-1]])

    return f"{masked_local}@{domain}"
