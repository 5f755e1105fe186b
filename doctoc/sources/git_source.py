"""
Git repository source.

Keeps a checkout of a remote repository in a fixed local directory: the first
sync clones it, later syncs pull into it.
"""

import logging
import os
import subprocess
from typing import List, Optional

from core.constants import DEFAULT_CACHE_DIR
from core.errors import SourceSyncError
from .source_base import BaseSourceProvider

logger = logging.getLogger(__name__)


class GitSourceProvider(BaseSourceProvider):
    """
    Documentation fetched from a git remote.
    """
    
    def __init__(
        self,
        remote_url: str,
        cache_dir: str = DEFAULT_CACHE_DIR,
        git_binary: str = "git"
    ):
        """
        Initialize git source.
        
        Args:
            remote_url: URL (or path) passed to git clone
            cache_dir: Local checkout directory
            git_binary: git executable
        """
        self.remote_url = remote_url
        self.cache_dir = cache_dir
        self.git_binary = git_binary
    
    def _run(self, args: List[str], cwd: Optional[str], action: str) -> str:
        """Run a git command and return its stdout."""
        try:
            completed = subprocess.run(
                [self.git_binary] + args,
                cwd=cwd,
                capture_output=True,
                encoding="utf-8",
                errors="replace"
            )
        except OSError as e:
            raise SourceSyncError(
                f"Fail to {action} docs from remote source({self.remote_url}): {e}"
            ) from e
        
        if completed.returncode != 0:
            raise SourceSyncError(
                f"Fail to {action} docs from remote source({self.remote_url}): "
                f"exit status {completed.returncode}",
                stderr=completed.stderr or ""
            )
        return completed.stdout or ""
    
    def ensure_local(self) -> str:
        abs_root = os.path.abspath(self.cache_dir)
        
        # Clone new or pull to update
        if os.path.isdir(abs_root):
            stdout = self._run(["pull"], cwd=abs_root, action="update")
        else:
            parent = os.path.dirname(abs_root)
            if parent:
                try:
                    os.makedirs(parent, exist_ok=True)
                except OSError as e:
                    raise SourceSyncError(
                        f"Fail to clone docs from remote source({self.remote_url}): {e}"
                    ) from e
            stdout = self._run(["clone", self.remote_url, abs_root], cwd=None, action="clone")
        
        if stdout.strip():
            logger.info(stdout.strip())
        return abs_root
