"""Pytest fixtures for Blog Distiller tests."""

import pytest

PRISM_DOCUMENT = """---
title: 'Adding Prism to a Next.js project'
date: '2023-01-04'
lastmod: '2023-01-11'
tags: ['next-js', 'prism', 'guide']
draft: false
summary: 'Guide to installing Prism in Next.js.'
images: ['https://example.com/prism.jpg']
authors: ['default']
---
Body text here.
"""

CONTEXT_DOCUMENT = """---
title: 'Using the React Context API'
date: '2023-01-11'
tags: ['react', 'guide']
draft: false
summary: 'Sharing state without prop drilling.'
---
Create a context first:

```jsx
const ThemeContext = React.createContext('light')
```

Then wrap the tree in a provider:

```js {2}
<ThemeContext.Provider value="dark">
  <Toolbar />
</ThemeContext.Provider>
```
"""

DRAFT_DOCUMENT = """---
title: 'Work in progress'
date: '2023-02-01'
tags: ['guide']
draft: true
summary: 'Not ready yet.'
---
"""


@pytest.fixture
def prism_document():
    """The Prism guide, with every recognized key present."""
    return PRISM_DOCUMENT


@pytest.fixture
def context_document():
    """The Context API guide, with code blocks and no authors/images keys."""
    return CONTEXT_DOCUMENT


@pytest.fixture
def draft_document():
    """A draft article with an empty body."""
    return DRAFT_DOCUMENT


@pytest.fixture
def content_dir(tmp_path):
    """Create a content directory with two published articles and a draft."""
    root = tmp_path / "data" / "blog"
    (root / "guides").mkdir(parents=True)
    (root / "prism-nextjs.mdx").write_text(PRISM_DOCUMENT, encoding="utf-8")
    (root / "guides" / "React Context.md").write_text(CONTEXT_DOCUMENT, encoding="utf-8")
    (root / "wip.mdx").write_text(DRAFT_DOCUMENT, encoding="utf-8")
    return root
