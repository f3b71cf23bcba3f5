# unipkg/overrides.py
"""
Per-package, per-manager override files.

An override lives at <overrides_dir>/<manager>/<package>.json and may hold
any of {"install": bool, "uninstall": bool, "exists": bool, "reason": str}.
Files are read on every call and never written.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_OVERRIDES_DIR = "overrides"
NO_REASON = "No reason specified"


@dataclass(frozen=True)
class OverridePolicy:
    install: Optional[bool] = None
    uninstall: Optional[bool] = None
    exists: Optional[bool] = None
    reason: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "OverridePolicy":
        def flag(key):
            value = data.get(key)
            return value if isinstance(value, bool) else None

        reason = data.get("reason")
        return cls(
            install=flag("install"),
            uninstall=flag("uninstall"),
            exists=flag("exists"),
            reason=reason if isinstance(reason, str) and reason else None,
        )


@dataclass(frozen=True)
class OverrideDecision:
    skip: bool = False
    reason: Optional[str] = None


PROCEED = OverrideDecision()


def skip_with_reason(reason):
    return OverrideDecision(skip=True, reason=reason)


def override_path(overrides_dir, manager, package) -> Path:
    return Path(overrides_dir) / str(manager) / f"{package}.json"


def load_policy(path: Path) -> Optional[OverridePolicy]:
    """
    Return the policy stored at 'path', or None when there is none.
    A file that can't be read or isn't a JSON object counts as none.
    """
    try:
        if not path.is_file():
            return None
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Ignoring override %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning(
            "Ignoring override %s: expected a JSON object, got %s",
            path,
            type(data).__name__,
        )
        return None
    return OverridePolicy.from_dict(data)


def resolve(package, manager, operation, skip_overrides=False,
            overrides_dir=DEFAULT_OVERRIDES_DIR) -> OverrideDecision:
    if skip_overrides:
        return PROCEED

    path = override_path(overrides_dir, manager, package)
    policy = load_policy(path)
    if policy is None:
        return PROCEED
    logger.debug("Loaded override %s: %s", path, policy)

    # "install" or "uninstall"
    op = str(operation)
    if getattr(policy, op) is False:
        return skip_with_reason(policy.reason or NO_REASON)

    # install skips on exists:true, uninstall on exists:false
    if op == "install" and policy.exists is True:
        return skip_with_reason(policy.reason or "Package marked as already present")
    if op == "uninstall" and policy.exists is False:
        return skip_with_reason(policy.reason or "Package marked as not existing")

    return PROCEED
