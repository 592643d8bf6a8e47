#!/usr/bin/env python3
"""
emailmask Quick Start Example

This example demonstrates the most common use cases for emailmask.
Run this script to see emailmask in action!
"""

from emailmask import EmailMasker, mask_email


def example_basic_usage():
    """Example 1: Masking single addresses."""
    print("\n" + "=" * 60)
    print("Example 1: Basic Usage")
    print("=" * 60)

    for email in ["ekaone3033@gmail.com", "a@test.com", "user@name@domain.com"]:
        print(f"  {email:<28} -> {mask_email(email)}")


def example_options():
    """Example 2: Masking options."""
    print("\n" + "=" * 60)
    print("Example 2: Options")
    print("=" * 60)

    email = "contact@mail.google.com"
    variants = {
        "defaults": {},
        "mask_domain": {"mask_domain": True},
        "visible_chars=0": {"visible_chars": 0},
        "mask_char='•'": {"mask_char": "•", "mask_domain": True},
        "viewable": {"viewable": True, "mask_domain": True},
    }

    for label, options in variants.items():
        print(f"  {label:<18} -> {mask_email(email, options)}")


def example_records():
    """Example 3: Masking records and free text."""
    print("\n" + "=" * 60)
    print("Example 3: Records and Text")
    print("=" * 60)

    masker = EmailMasker(visible_chars=1, mask_domain=True)
    users = [
        {"id": 1, "email": "alice@example.com", "manager": {"email": "boss@corp.io"}},
        {"id": 2, "email": None, "manager": {"email": "boss@corp.io"}},
    ]

    for record in masker.mask_records(users, ["email", "manager.email"]):
        print(f"  {record}")

    line = "password reset requested by alice@example.com"
    print(f"\n  {masker.mask_text(line)}")
    print(f"\n  Stats: {masker.get_stats()}")


if __name__ == "__main__":
    example_basic_usage()
    example_options()
    example_records()
