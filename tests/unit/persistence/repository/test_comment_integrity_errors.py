"""Unit tests for translating comment write failures into domain errors."""

from sqlalchemy.exc import IntegrityError

from remark.domain.error import ConflictError, NotFoundError
from remark.persistence.repository.comment import integrity_error_to_domain
from tests.conftest import make_comment


class DriverError(Exception):
    """Stand-in for a database driver exception carrying SQLSTATE details."""

    def __init__(self, sqlstate=None, constraint_name=None):
        super().__init__("driver error")
        self.sqlstate = sqlstate
        self.constraint_name = constraint_name


def _integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO comments ...", {}, orig)


class TestIntegrityErrorToDomain:
    """Tests for integrity_error_to_domain."""

    def test_unknown_author_is_not_found(self):
        comment = make_comment()
        error = _integrity_error(
            DriverError(sqlstate="23503", constraint_name="comments_author_id_fkey")
        )

        result = integrity_error_to_domain(error, comment)

        assert isinstance(result, NotFoundError)
        assert result.resource == "User"
        assert result.identifier == str(comment.author_id)

    def test_unknown_parent_is_not_found(self):
        parent = make_comment()
        comment = make_comment(parent=parent)
        error = _integrity_error(
            DriverError(sqlstate="23503", constraint_name="comments_parent_id_fkey")
        )

        result = integrity_error_to_domain(error, comment)

        assert isinstance(result, NotFoundError)
        assert result.resource == "Parent comment"
        assert result.identifier == str(parent.id)

    def test_details_read_from_chained_driver_error(self):
        """The adapted DBAPI error may only carry details on its cause."""
        comment = make_comment()
        adapted = Exception("adapted")
        adapted.__cause__ = DriverError(
            sqlstate="23503", constraint_name="comments_author_id_fkey"
        )

        result = integrity_error_to_domain(_integrity_error(adapted), comment)

        assert isinstance(result, NotFoundError)
        assert result.resource == "User"

    def test_unique_violation_is_conflict(self):
        error = _integrity_error(
            DriverError(sqlstate="23505", constraint_name="comments_pkey")
        )

        result = integrity_error_to_domain(error, make_comment())

        assert isinstance(result, ConflictError)

    def test_missing_details_is_conflict(self):
        result = integrity_error_to_domain(
            _integrity_error(Exception("opaque")), make_comment()
        )

        assert isinstance(result, ConflictError)
