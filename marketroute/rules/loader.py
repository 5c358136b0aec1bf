from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from marketroute.rules.models import RoutingRules

DEFAULT_TABLES: dict[str, Any] = {
    "global_locale": "eng-GB",
    "global_market": "global",
    "default_siteaccess": "global-en",
    "locales": [
        {"code": "eng-GB", "display_name": "English (Global)"},
        {"code": "eng-MY", "display_name": "English (Malaysia)"},
        {"code": "eng-TH", "display_name": "English (Thailand)"},
        {"code": "tha-TH", "display_name": "ภาษาไทย (Thai)"},
    ],
    "markets": [
        {"code": "global", "url_prefix": "/global-en", "locales": ["eng-GB"]},
        {"code": "my", "url_prefix": "/my-en", "locales": ["eng-MY", "eng-GB"]},
        {"code": "th", "url_prefix": "/th-en", "locales": ["eng-TH", "tha-TH", "eng-GB"]},
    ],
    "siteaccesses": [
        {"name": "global-en", "url_prefix": "/global-en", "locale": "eng-GB", "market": "global"},
        {"name": "my-en", "url_prefix": "/my-en", "locale": "eng-MY", "market": "my"},
        {"name": "th-en", "url_prefix": "/th-en", "locale": "eng-TH", "market": "th"},
        {"name": "th-th", "url_prefix": "/th-th", "locale": "tha-TH", "market": "th"},
    ],
    "admin": {"name": "admin", "url_prefix": "/admin"},
}


def default_rules() -> RoutingRules:
    """Built-in locale/market/siteaccess tables."""
    return RoutingRules.model_validate(DEFAULT_TABLES)


def _extract_yaml(content: str) -> str:
    # Accept a markdown document carrying a ```yaml block, or plain YAML
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def load_rules(path: Path) -> RoutingRules:
    """
    Load and validate a routing rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the tables are invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Routing rules file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in routing rules file: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Routing rules file {path} must contain a mapping")

    try:
        return RoutingRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Routing rules validation failed:\n{e}") from e
