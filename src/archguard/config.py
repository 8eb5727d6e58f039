"""
Rule configuration.

Builds rule instances from plain configuration data: either a JSON rule-set
document (validated against ``rules.schema.json``) or the tuple form
``(marker, min_args, max_args, excluded_prefixes)`` for arity rules.

Example rule set:

    {
      "exclude": ["conference.logging"],
      "rules": [
        {"type": "marker_arity", "marker": "location_info_streamer",
         "min_args": 1, "max_args": 3},
        {"type": "forbidden_calls"},
        {"type": "generic_exceptions", "exclude": ["conference.legacy"]}
      ]
    }
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from archguard.domain.exceptions import RuleConfigurationError
from archguard.domain.interfaces import RuleInterface
from archguard.infrastructure.registry import RuleRegistry
from archguard.rules.composite import NamespaceExclusion
from archguard.rules.namespaces import normalize_prefixes
from archguard.rules.static import MarkerArityRule
from archguard.schemas import validate_rules

logger = logging.getLogger("archguard.config")

# Keys handled here rather than passed to the rule constructor
_RESERVED_KEYS = {"type", "id", "exclude"}


def build_rule(entry: dict[str, Any], global_exclude: Iterable[str] = ()) -> RuleInterface:
    """
    Build one rule from a configuration entry.

    Raises:
        RuleConfigurationError: If the type is unknown or the options are invalid
    """
    options = {k: v for k, v in entry.items() if k not in _RESERVED_KEYS}
    if "id" in entry:
        options["rule_id"] = entry["id"]

    try:
        rule = RuleRegistry.create(entry["type"], **options)
    except KeyError as e:
        raise RuleConfigurationError(str(e.args[0])) from e
    except TypeError as e:
        raise RuleConfigurationError(
            f"Invalid options for rule type '{entry['type']}': {e}"
        ) from e

    excluded = [*global_exclude, *entry.get("exclude", ())]
    if excluded:
        rule = NamespaceExclusion(rule, excluded)
    logger.debug("Configured rule %r", rule)
    return rule


def load_rules(data: dict[str, Any]) -> list[RuleInterface]:
    """
    Build the ordered rule list from a rule-set document.

    Raises:
        jsonschema.ValidationError: If the document does not match the schema
        RuleConfigurationError: If a rule cannot be constructed
    """
    validate_rules(data)
    global_exclude = data.get("exclude", ())
    rules = [build_rule(entry, global_exclude) for entry in data["rules"]]
    logger.info("Loaded %d rule(s)", len(rules))
    return rules


def load_rules_file(path: str | Path) -> list[RuleInterface]:
    """Read a JSON rule-set file and build its rules."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise RuleConfigurationError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RuleConfigurationError(f"Cannot read rule set {path}: {e}") from e
    return load_rules(data)


def rules_from_tuples(
    entries: Iterable[tuple[str, int, int, Iterable[str]]],
) -> list[RuleInterface]:
    """
    Build arity rules from ``(marker, min_args, max_args, excluded_prefixes)``.

    Entries with no excluded prefixes are returned unwrapped.
    """
    rules: list[RuleInterface] = []
    for marker, min_args, max_args, excluded in entries:
        rule: RuleInterface = MarkerArityRule(marker, min_args, max_args)
        excluded = normalize_prefixes(excluded)
        if excluded:
            rule = NamespaceExclusion(rule, excluded)
        rules.append(rule)
    return rules
