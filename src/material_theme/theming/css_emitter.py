"""
Theme stylesheet generation.

Renders a generated scheme as a Tailwind CSS ``@theme`` block that can be
written verbatim to a ``.css`` file.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence, Union

from material_theme.config import ThemeConfig, get_theme_config
from material_theme.theming.variables import convert_to_variables

logger = logging.getLogger(__name__)


def _iso_timestamp(moment: Optional[datetime] = None) -> str:
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def supplementary_declarations(config: Optional[ThemeConfig] = None) -> str:
    """
    Fixed link and form variables appended after the scheme variables.

    The form aliases cross brightness on purpose (``light-on-form`` points at
    the dark lowest container, ``dark-form`` at the light on-surface).
    """
    cfg = config or get_theme_config()
    return (
        f"  --color-light-link: var({cfg.light_link_color});\n"
        f"  --color-dark-link: var({cfg.dark_link_color});\n"
        "  --color-light-form: var(--color-light-surface-container-lowest);\n"
        "  --color-light-on-form: var(--color-dark-surface-container-lowest);\n"
        "  --color-dark-form: var(--color-light-on-surface);\n"
        "  --color-dark-on-form: var(--color-dark-on-surface);\n"
    )


def generate_theme_css(
    scheme: Sequence,
    seed_color: str,
    contrast_level: Union[float, str],
    generated_at: Optional[datetime] = None,
    config: Optional[ThemeConfig] = None,
) -> str:
    """
    Generate a complete theme stylesheet.

    Args:
        scheme: Generated scheme (light, dark)
        seed_color: Seed color written into the header as given
        contrast_level: Contrast level, formatted with two decimals
        generated_at: Timestamp for the header (defaults to now, UTC)
        config: Export settings (defaults to the global ``ThemeConfig``)

    Returns:
        str: Stylesheet text ending with a newline

    Raises:
        MalformedSchemeError: If the scheme is malformed
    """
    cfg = config or get_theme_config()
    declarations = "\n".join(
        f"  {name}: {value};" for name, value in convert_to_variables(scheme)
    )

    return f"""/**
 * Theme colors for Tailwind CSS / Material Design 3
 *
 * Generated by: {cfg.generator_name}
 * Generated at: {_iso_timestamp(generated_at)}
 * Seed color  : {seed_color}
 * Contrast    : {float(contrast_level):.2f}
 */

@theme {{
{declarations}

{supplementary_declarations(cfg)}}}
"""


def save_theme_css(
    output_path: Union[str, Path],
    scheme: Sequence,
    seed_color: str,
    contrast_level: Union[float, str],
    config: Optional[ThemeConfig] = None,
) -> Path:
    """
    Write the generated stylesheet to ``output_path``.

    A directory path receives the configured file name (``theme.css``).

    Returns:
        Path: The file written
    """
    cfg = config or get_theme_config()
    path = Path(output_path)
    if path.is_dir():
        path = path / cfg.css_filename

    css = generate_theme_css(scheme, seed_color, contrast_level, config=cfg)
    path.write_text(css, encoding="utf-8")

    logger.info(f"Theme stylesheet saved to {path}")
    return path
