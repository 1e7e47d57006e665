"""Download trigger state.

A download is started from a control (the "Download All Skills" or
"Download SKILL.md" button). While a download runs the control is disabled
and shows a busy label; ``busy()`` puts it back to idle however the
download ends.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Generator

from econskills.constants import BUSY_LABEL, DOWNLOAD_ALL_LABEL, DOWNLOAD_SKILL_LABEL

# Called with a user-facing message when a download fails
Alert = Callable[[str], None]


@dataclass
class DownloadControl:
    """Enabled/disabled state and label of a download trigger."""

    idle_label: str
    label: str = ""
    disabled: bool = False
    listeners: list[Callable[["DownloadControl"], None]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.idle_label

    @property
    def is_idle(self) -> bool:
        return not self.disabled and self.label == self.idle_label

    def _set(self, disabled: bool, label: str) -> None:
        self.disabled = disabled
        self.label = label
        for listener in self.listeners:
            listener(self)

    @contextmanager
    def busy(self, label: str = BUSY_LABEL) -> Generator["DownloadControl", None, None]:
        self._set(True, label)
        try:
            yield self
        finally:
            self._set(False, self.idle_label)


def download_all_control() -> DownloadControl:
    return DownloadControl(idle_label=DOWNLOAD_ALL_LABEL)


def download_skill_control() -> DownloadControl:
    return DownloadControl(idle_label=DOWNLOAD_SKILL_LABEL)
