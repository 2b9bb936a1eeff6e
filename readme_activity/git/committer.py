"""Commit and push the README with the git command line."""

import asyncio
from pathlib import Path

from readme_activity.core.logging import get_logger
from readme_activity.readme.document import write_lines
from readme_activity.shared.exceptions import GitCommandError
from readme_activity.shared.models import PersistOutcome

logger = get_logger(__name__)

NOTHING_TO_COMMIT = "nothing to commit"


class GitCommitter:
    """Stage, commit and push a single file.

    Each git call runs to completion before the next one starts; a non-zero
    exit raises GitCommandError and nothing is retried.
    """

    def __init__(
        self,
        message: str,
        user_name: str,
        user_email: str,
        cwd: str | Path | None = None,
    ) -> None:
        """Initialize the committer.

        Args:
            message: Commit message
            user_name: Committer name written to git config
            user_email: Committer email written to git config
            cwd: Working tree to run git in (defaults to the process cwd)
        """
        self.message = message
        self.user_name = user_name
        self.user_email = user_email
        self.cwd = str(cwd) if cwd is not None else None

    async def _git(self, *args: str) -> tuple[int, str]:
        process = await asyncio.create_subprocess_exec(
            "git",
            *args,
            cwd=self.cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
        stdout, _ = await process.communicate()
        output = stdout.decode(errors="replace") if stdout else ""
        returncode = process.returncode if process.returncode is not None else -1
        logger.debug("git.command.finished", args=list(args), returncode=returncode)
        return returncode, output

    async def _run(self, *args: str) -> str:
        returncode, output = await self._git(*args)
        if returncode != 0:
            raise GitCommandError(returncode, list(args), output)
        return output

    async def persist(self, path: str | Path) -> PersistOutcome:
        """Commit ``path`` and push it to the remote.

        Args:
            path: File to stage, relative to the working tree

        Returns:
            COMMITTED when a commit was pushed, NOTHING_TO_COMMIT when the
            staged tree already matched HEAD

        Raises:
            GitCommandError: If any git command fails
        """
        await self._run("config", "--global", "user.email", self.user_email)
        await self._run("config", "--global", "user.name", self.user_name)
        await self._run("add", "--", str(path))

        # Exit status 0 means nothing is staged
        returncode, _ = await self._git("diff", "--cached", "--quiet", "--exit-code")
        if returncode == 0:
            logger.info("git.commit.nothing_to_commit", path=str(path))
            return PersistOutcome.NOTHING_TO_COMMIT

        returncode, output = await self._git("commit", "-m", self.message)
        if returncode != 0:
            if NOTHING_TO_COMMIT in output:
                logger.info("git.commit.nothing_to_commit", path=str(path))
                return PersistOutcome.NOTHING_TO_COMMIT
            raise GitCommandError(returncode, ["commit", "-m", self.message], output)

        await self._run("push")
        logger.info("git.push.completed", path=str(path))
        return PersistOutcome.COMMITTED


async def persist_document(
    path: str | Path, lines: list[str], committer: GitCommitter
) -> PersistOutcome:
    """Write the document, then commit and push it.

    Args:
        path: Document path
        lines: Full document lines to write
        committer: Git committer used after the write

    Returns:
        Outcome of the commit/push

    Raises:
        DocumentError: If the write fails (nothing is committed)
        GitCommandError: If committing or pushing fails (the write has happened)
    """
    write_lines(path, lines)
    return await committer.persist(path)
