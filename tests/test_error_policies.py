"""
Tests for visitor error handling policies.
"""

import pytest

from searchtreelib import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
    PreOrderTraverser,
    TraversalOrder,
    build_tree,
    traverse_tree,
)


def failing_on_even(seen):
    """Visitor that records every value and raises on even ones."""
    def visit(value):
        seen.append(value)
        if value % 2 == 0:
            raise ValueError(f"even value {value}")
    return visit


@pytest.fixture
def tree():
    return build_tree([5, 3, 8, 1, 4])


class TestErrorPolicies:
    """Test individual error policy behaviors."""

    def test_fail_fast_policy(self):
        """FailFastPolicy should re-raise any error."""
        policy = FailFastPolicy()

        with pytest.raises(KeyError):
            policy.handle(KeyError("missing"), 3, TraversalOrder.IN_ORDER)

    def test_continue_on_errors_policy_records(self):
        policy = ContinueOnErrorsPolicy(verbose=False)

        policy.handle(ValueError("bad"), 3, TraversalOrder.PRE_ORDER)

        assert len(policy.errors) == 1
        record = policy.errors[0]
        assert record['value'] == 3
        assert record['order'] == "pre_order"
        assert record['error_type'] == "ValueError"
        assert record['error_message'] == "bad"

    def test_continue_on_errors_policy_verbose(self, capsys):
        policy = ContinueOnErrorsPolicy(verbose=True)

        policy.handle(ValueError("bad"), 3, TraversalOrder.IN_ORDER)

        captured = capsys.readouterr()
        assert "WARNING" in captured.err
        assert "3" in captured.err
        assert captured.out == ""

    def test_collect_errors_policy_is_silent(self, capsys):
        policy = CollectErrorsPolicy()

        policy.handle(ValueError("bad"), 3, TraversalOrder.IN_ORDER)

        assert len(policy.errors) == 1
        assert capsys.readouterr().err == ""

    def test_threshold_policy(self):
        policy = ThresholdPolicy(max_errors=2, verbose=False)

        policy.handle(ValueError("1"), 1, TraversalOrder.IN_ORDER)
        policy.handle(ValueError("2"), 2, TraversalOrder.IN_ORDER)

        last = ValueError("3")
        with pytest.raises(RuntimeError, match="threshold exceeded") as excinfo:
            policy.handle(last, 3, TraversalOrder.IN_ORDER)
        assert excinfo.value.__cause__ is last
        assert policy.error_count == 3

    def test_abstract_policy(self):
        with pytest.raises(TypeError):
            ErrorPolicy()


class TestPoliciesDuringTraversal:
    """Test policies wired into traversals."""

    def test_default_propagates_visitor_error(self, tree):
        seen = []
        with pytest.raises(ValueError, match="even value 4"):
            traverse_tree(tree, failing_on_even(seen))
        # In-order stops right after 4
        assert seen == [1, 3, 4]

    def test_continue_visits_every_value(self, tree):
        seen = []
        policy = ContinueOnErrorsPolicy(verbose=False)

        traverse_tree(tree, failing_on_even(seen), error_policy=policy)

        assert seen == [1, 3, 4, 5, 8]
        stats = policy.get_statistics()
        assert stats['total_errors'] == 2
        assert stats['by_type'] == {'ValueError': 2}
        assert stats['failed_values'] == [4, 8]

    def test_collect_errors_records_order(self, tree):
        policy = CollectErrorsPolicy()

        traverse_tree(tree, failing_on_even([]), order="post", error_policy=policy)

        assert [e['value'] for e in policy.errors] == [4, 8]
        assert {e['order'] for e in policy.errors} == {"post_order"}

    def test_threshold_stops_traversal(self, tree):
        seen = []
        policy = ThresholdPolicy(max_errors=1, verbose=False)

        with pytest.raises(RuntimeError):
            traverse_tree(tree, failing_on_even(seen), error_policy=policy)

        assert seen == [1, 3, 4, 5, 8]
        assert policy.error_count == 2

    def test_traverser_with_policy(self, tree):
        policy = CollectErrorsPolicy()
        seen = []

        PreOrderTraverser(error_policy=policy).traverse(tree, failing_on_even(seen))

        assert seen == [5, 3, 1, 4, 8]
        assert [e['value'] for e in policy.errors] == [4, 8]

    def test_fail_fast_subclass_handle_is_called(self, tree):
        class RecordingFailFast(FailFastPolicy):
            def __init__(self):
                self.seen = []

            def handle(self, error, value, order):
                self.seen.append(value)
                super().handle(error, value, order)

        policy = RecordingFailFast()

        with pytest.raises(ValueError, match="even value 4"):
            traverse_tree(tree, failing_on_even([]), error_policy=policy)
        assert policy.seen == [4]

    def test_fail_fast_subclass_can_remap_errors(self, tree):
        class RemappingPolicy(FailFastPolicy):
            def handle(self, error, value, order):
                raise RuntimeError(f"visitor failed on {value}") from error

        with pytest.raises(RuntimeError, match="visitor failed on 4") as excinfo:
            traverse_tree(tree, failing_on_even([]), error_policy=RemappingPolicy())
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_fail_fast_preserves_exception_identity(self, tree):
        error = LookupError("stop")

        def visit(value):
            raise error

        with pytest.raises(LookupError) as excinfo:
            traverse_tree(tree, visit, error_policy=FailFastPolicy())
        assert excinfo.value is error
