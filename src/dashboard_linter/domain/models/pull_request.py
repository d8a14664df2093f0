"""Pull request file model — one entry of the "list pull request files" API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ChangedFile(BaseModel):
    """A file touched by a pull request.

    Only the fields the linter needs are typed; the remaining keys of the
    GitHub payload (``sha``, ``patch``, ``additions`` ...) are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    filename: str
    status: str = "modified"
    raw_url: str

    @property
    def is_removed(self) -> bool:
        return self.status == "removed"
