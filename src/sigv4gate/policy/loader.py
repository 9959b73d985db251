"""Read policy YAML files and hand out policy snapshots."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Literal, Optional, Tuple, Union

import yaml

from sigv4gate.policy.models import Policy, PolicyFormatError, PolicyIOError

log = logging.getLogger(__name__)

ReloadMode = Literal["always", "mtime"]
RELOAD_MODES = ("always", "mtime")


def load_policy(path: Union[str, Path]) -> Policy:
    """Load and validate the policy at *path*.

    Raises PolicyIOError when the file cannot be read and PolicyFormatError
    when its contents are not a policy document.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        raise PolicyIOError(f"I/O error reading {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise PolicyFormatError(f"{path} is not valid UTF-8: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PolicyFormatError(f"YAML parse error in {path}: {exc}") from exc

    try:
        policy = Policy.from_dict(data)
    except PolicyFormatError as exc:
        raise PolicyFormatError(f"{path}: {exc}") from exc

    log.debug("Loaded policy %s with %d account entries", path, len(policy.accounts))
    return policy


class PolicySource:
    """Hands out policy snapshots for one policy file.

    ``reload="always"`` re-reads the file for every snapshot.
    ``reload="mtime"`` keeps the last parsed policy until the file's
    modification time or size changes. Safe to share between threads.
    """

    def __init__(self, path: Union[str, Path], *, reload: ReloadMode = "always") -> None:
        if reload not in RELOAD_MODES:
            raise ValueError(f"reload must be one of {RELOAD_MODES}, got {reload!r}")
        self.path = Path(path)
        self.reload = reload
        self._lock = threading.Lock()
        self._cached: Optional[Policy] = None
        self._stamp: Optional[Tuple[int, int]] = None

    def _file_stamp(self) -> Tuple[int, int]:
        try:
            st = self.path.stat()
        except OSError as exc:
            raise PolicyIOError(f"I/O error reading {self.path}: {exc}") from exc
        return st.st_mtime_ns, st.st_size

    def snapshot(self) -> Policy:
        """Return the current policy. Raises PolicyError on load failure."""
        if self.reload == "always":
            return load_policy(self.path)

        with self._lock:
            stamp = self._file_stamp()
            if self._cached is None or stamp != self._stamp:
                if self._cached is not None:
                    log.info("Policy file changed, reloading %s", self.path)
                self._cached = load_policy(self.path)
                self._stamp = stamp
            return self._cached
