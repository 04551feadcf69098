"""Asset file helpers.

Logos are stored next to the chain record and referenced by a path
relative to the chain directory.
"""

from __future__ import annotations

from pathlib import Path

from ... import const
from .validators import ValidationError


def resolve_asset(chain_dir: Path, relative: str) -> Path:
    """Resolve a record-relative asset path inside the chain directory."""
    return chain_dir / relative.lstrip("/")


def check_logo(logo: str, chain_dir: Path) -> str:
    """Validate an optional logo reference. Empty is allowed.

    Args:
        logo: Logo path relative to the chain directory
        chain_dir: Directory holding the chain record

    Returns:
        Validated logo reference

    Raises:
        ValidationError: If the file is missing or is not an image
    """
    if not logo:
        return logo

    logo_path = resolve_asset(chain_dir, logo)
    if not logo_path.is_file():
        raise ValidationError(f"Logo file not found: {logo_path}")
    if logo_path.suffix.lower() not in const.LOGO_EXTENSIONS:
        raise ValidationError(f"Logo file must be PNG, JPG, JPEG, or SVG: {logo_path}")
    return logo
