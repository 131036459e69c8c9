## excl.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p
import re

ALWAYS_EXCLUDE = ("manifest.json", "pack_icon.png", "bug_pack_icon.png")

def normalize_path(relative_path):
    return relative_path.replace("\\", "/")

def compile_pattern(pattern):
    ## only * and ? are wildcards, everything else is literal
    parts = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)

class ExclusionMatcher:
    def __init__(self, patterns=None):
        self.patterns = list(patterns or [])
        self._compiled = [compile_pattern(p) for p in self.patterns]

    def is_excluded(self, relative_path):
        path = normalize_path(relative_path)
        if path in ALWAYS_EXCLUDE:
            return True
        return any(rx.fullmatch(path) for rx in self._compiled)

def is_excluded(relative_path, user_patterns=None):
    return ExclusionMatcher(user_patterns).is_excluded(relative_path)

## end
