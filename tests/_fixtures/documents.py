"""Sample governance documents used across the test suite."""

from __future__ import annotations

COMPLIANT_RULE = """---
name: Secure Coding
description: Baseline secure coding rules for services
author: Platform Team
version: 1.0
---

# Secure Coding

## Guidelines

This rule describes how platform services handle untrusted data, secrets and
transport security across every environment we operate, including staging and
production clusters.

Engineers must validate all input at trust boundaries. Secrets must be stored
in the vault. Services never log credentials and never disable TLS verification.

### Depends On
- [Meta governance](META_GOVERNANCE.md)
"""

NO_FRONTMATTER_RULE = """# Logging

Applications write structured logs.
"""

HORIZONTAL_RULE_BODY = """# Logging

Applications write structured logs.

---

Footer text.
"""

SEE_ALSO_ONLY_RULE = """---
name: Naming
description: Naming conventions
author: Docs Team
version: 2.3
---

# Naming

### See Also
- [Style guide](STYLE.md)
"""


def padded(text: str, words: int = 60) -> str:
    """Append neutral filler words so length warnings do not fire."""
    filler = " ".join(["context"] * words)
    return f"{text}\n{filler}\n"


__all__ = [
    "COMPLIANT_RULE",
    "HORIZONTAL_RULE_BODY",
    "NO_FRONTMATTER_RULE",
    "SEE_ALSO_ONLY_RULE",
    "padded",
]
