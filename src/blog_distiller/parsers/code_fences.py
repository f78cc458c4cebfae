"""Fenced code block scanning.

Bodies are handed to the renderer untouched; the language tags of their
fenced code blocks are collected so the renderer knows which highlighting
grammars a post needs.
"""

import re

FENCE_PATTERN = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
INFO_SEPARATOR = re.compile(r"[\s{:]")


def language_from_info(info: str) -> str:
    """Extract the language tag from a fence info string.

    Examples:
        >>> language_from_info("js {1,3-4} showLineNumbers")
        'js'
        >>> language_from_info("jsx:components/Image.js")
        'jsx'
    """
    return INFO_SEPARATOR.split(info.strip(), maxsplit=1)[0]


def find_code_languages(body: str) -> list[str]:
    """Return the language tags of fenced code blocks in a body.

    Tags are returned in first-seen order without duplicates. Lines inside a
    code block are not scanned, so fences quoted within a block are ignored.

    Args:
        body: Markdown/MDX body text

    Returns:
        List of language tags; untagged blocks contribute nothing

    Examples:
        >>> find_code_languages("```js\\nconst a = 1\\n```\\n")
        ['js']
    """
    languages: list[str] = []
    open_fence: str | None = None

    for line in body.splitlines():
        match = FENCE_PATTERN.match(line)
        if open_fence is None:
            if match is None:
                continue
            fence, info = match.group("fence"), match.group("info")
            # A backtick fence may not have backticks in its info string
            if fence[0] == "`" and "`" in info:
                continue
            open_fence = fence
            language = language_from_info(info)
            if language and language not in languages:
                languages.append(language)
        elif (
            match is not None
            and match.group("fence")[0] == open_fence[0]
            and len(match.group("fence")) >= len(open_fence)
            and not match.group("info").strip()
        ):
            open_fence = None

    return languages
