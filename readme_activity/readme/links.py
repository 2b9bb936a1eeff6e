"""Markdown link builders for repositories, issues and pull requests."""

import re

from readme_activity.shared.models import RawEvent

WEB_ORIGIN = "https://github.com"

# "api.github.com/repos/" and friends map onto the web host
_API_HOST_PATTERN = re.compile(r"api\.github\.com/.*?/")


def issue_or_pr_link(event: RawEvent) -> str:
    """Build a link to the issue or pull request an event refers to.

    Args:
        event: Event whose payload carries an ``issue`` or ``pull_request``

    Returns:
        Markdown link such as ``[#12](https://github.com/owner/repo/issues/12)``
    """
    if "issue" in event.payload:
        number = event.payload["issue"]["number"]
        return f"[#{number}]({WEB_ORIGIN}/{event.repo.name}/issues/{number})"

    number = event.payload["pull_request"]["number"]
    return f"[#{number}]({WEB_ORIGIN}/{event.repo.name}/pull/{number})"


def url_link(target: str, name: str | None = None) -> str:
    """Build a link from a repository name, API URL or web URL.

    Args:
        target: ``owner/repo``, ``https://api.github.com/repos/owner/repo``,
            ``github.com/owner/repo`` or a full web URL
        name: Display text; defaults to the last path segment

    Returns:
        Markdown link such as ``[repo](https://github.com/owner/repo)``

    Example:
        >>> url_link("https://api.github.com/repos/octo/hello")
        '[hello](https://github.com/octo/hello)'
        >>> url_link("octo/hello")
        '[hello](https://github.com/octo/hello)'
    """
    url = _API_HOST_PATTERN.sub("github.com/", target, count=1)

    if not url.startswith(WEB_ORIGIN):
        if url.startswith("github.com/"):
            url = f"https://{url}"
        elif not url.startswith("http"):
            url = f"{WEB_ORIGIN}/{url.lstrip('/')}"

    if name is None:
        name = url.rstrip("/").split("/")[-1]
    return f"[{name}]({url})"
