# gitguy/ai/parsing.py
# Parse model replies into (commit message, PR description)

from __future__ import annotations

import re

from ..core.exceptions import ResponseParseError

COMMIT_PREFIX = "COMMIT:"
PR_PREFIX = "PR:"

_THINKING = re.compile(r"<think>.*?</think>", re.DOTALL)


# reasoning models may prepend a <think> block before the answer
def strip_thinking(text: str) -> str:
    return _THINKING.sub("", text).strip()


# * Split a reply into its COMMIT: line & PR: block
# * Everything after the PR: line is the description; text on the PR: line itself is kept
def parse_commit_and_pr(content: str) -> tuple[str, str]:
    commit_message = ""
    pr_lines: list[str] = []
    in_pr = False

    for line in strip_thinking(content).split("\n"):
        if in_pr:
            pr_lines.append(line)
        elif line.startswith(COMMIT_PREFIX):
            commit_message = line[len(COMMIT_PREFIX) :].strip()
        elif line.startswith(PR_PREFIX):
            in_pr = True
            inline = line[len(PR_PREFIX) :].strip()
            if inline:
                pr_lines.append(inline)

    if not commit_message:
        raise ResponseParseError("no commit message found in response")

    pr_description = "\n".join(pr_lines).strip()
    if not pr_description:
        raise ResponseParseError("no PR description found in response")

    return commit_message, pr_description
