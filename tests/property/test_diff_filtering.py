"""
Property-based tests for diff filtering.

Properties: identity, idempotence, order preservation, non-empty output.
"""

from hypothesis import given, strategies as st

from diffguard.models.diff import PLACEHOLDER_DIFF
from diffguard.review.diff_filter import filter_diff, path_matches, split_diff


path_segment = st.text(alphabet="abcxyz_-", min_size=1, max_size=8)
extension = st.sampled_from([".py", ".ts", ".lock", ".md", ".json", ""])

file_paths = st.builds(
    lambda parts, ext: "/".join(parts) + ext,
    st.lists(path_segment, min_size=1, max_size=3),
    extension,
)

patterns = st.lists(
    st.one_of(
        st.sampled_from(["*.lock", "*.md", "package-lock.json", "a*", "?", "*", "x/*.py", "[bad"]),
        path_segment,
    ),
    max_size=4,
)


def build_diff(paths):
    return "".join(
        f"diff --git a/{path} b/{path}\n"
        f"--- a/{path}\n"
        f"+++ b/{path}\n"
        "@@ -1 +1 @@\n"
        f"-old {i}\n"
        f"+new {i}\n"
        for i, path in enumerate(paths)
    )


class TestDiffFilterProperties:
    """Property tests for filter_diff."""

    @given(paths=st.lists(file_paths, max_size=8))
    def test_identity_without_patterns(self, paths):
        """
        Property: an empty pattern list leaves the diff untouched.
        """
        diff = build_diff(paths)
        assert filter_diff(diff, []) == diff

    @given(paths=st.lists(file_paths, max_size=8), pattern_list=patterns)
    def test_idempotence(self, paths, pattern_list):
        """
        Property: filtering twice removes nothing more than filtering once.
        """
        diff = build_diff(paths)
        once = filter_diff(diff, pattern_list)
        assert filter_diff(once, pattern_list) == once

    @given(paths=st.lists(file_paths, min_size=1, max_size=8), pattern_list=patterns)
    def test_non_empty_output(self, paths, pattern_list):
        """
        Property: a non-empty diff never filters down to an empty string.
        """
        assert filter_diff(build_diff(paths), pattern_list) != ""

    @given(paths=st.lists(file_paths, min_size=1, max_size=8), pattern_list=patterns)
    def test_order_and_membership(self, paths, pattern_list):
        """
        Property: kept sections are exactly the non-matching ones, in input order.

        Given: A diff with several sections
        When: It is filtered
        Then: Each section is kept iff no pattern matches it, and order holds
        """
        diff = build_diff(paths)
        result = filter_diff(diff, pattern_list)

        active = [p for p in pattern_list if p]
        expected = [
            path for path in paths
            if not active or not any(path_matches(path, p) for p in active)
        ]

        if not expected:
            assert result == PLACEHOLDER_DIFF
            return

        _, sections = split_diff(result)
        assert [section.path for section in sections] == expected
        assert result == build_diff_subset(paths, expected)


def build_diff_subset(paths, kept):
    """Rebuild the expected output keeping original section bodies."""
    _, sections = split_diff(build_diff(paths))
    remaining = list(kept)
    out = []
    for section in sections:
        if remaining and section.path == remaining[0]:
            out.append(section.render())
            remaining.pop(0)
    return "".join(out)
