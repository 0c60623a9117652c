"""RepositoryDescriptor — a source repository URL and its local cache path."""

import hashlib
import re
from pathlib import Path

from pydantic import BaseModel, Field

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]+")
_DIGEST_LENGTH = 12


class RepositoryDescriptor(BaseModel, frozen=True):
    url: str = Field(min_length=1)
    path: Path


def repository_directory_name(url: str) -> str:
    """Map a repository URL to a stable, filesystem-safe directory name.

    The readable slug is lossy, so a digest of the exact URL is appended to keep
    distinct URLs in distinct directories.

    >>> repository_directory_name("https://github.com/org/repo.git")
    'github-com-org-repo-git-deb25368bca2'
    """
    stripped = re.sub(r"^[A-Za-z]+://", "", url)
    slug = _UNSAFE_CHARS.sub("-", stripped).strip("-")
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:_DIGEST_LENGTH]
    return f"{slug}-{digest}"
