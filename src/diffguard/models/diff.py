"""
Diff Data Models

Unified diff 관련 데이터 모델들
"""

from dataclasses import dataclass
from typing import Optional


# Every file section of a git unified diff starts with this token.
SECTION_MARKER = "diff --git "

PLACEHOLDER_PATH = ".diffguard/no-reviewable-changes"

# Returned instead of an empty string when every section was excluded.
PLACEHOLDER_DIFF = (
    f"{SECTION_MARKER}a/{PLACEHOLDER_PATH} b/{PLACEHOLDER_PATH}\n"
    "new file mode 100644\n"
    "--- /dev/null\n"
    f"+++ b/{PLACEHOLDER_PATH}\n"
    "@@ -0,0 +1 @@\n"
    "+All changed files were excluded from review.\n"
)


@dataclass(frozen=True)
class DiffSection:
    """diff의 파일 단위 섹션 (marker 제외)"""
    path: Optional[str]
    text: str

    @property
    def basename(self) -> Optional[str]:
        """경로의 마지막 컴포넌트"""
        if self.path is None:
            return None
        return self.path.rsplit('/', 1)[-1]

    def render(self) -> str:
        """marker를 다시 붙인 원본 텍스트"""
        return f"{SECTION_MARKER}{self.text}"
