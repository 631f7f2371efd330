"""Unit tests for capability checks."""

from uuid import uuid4

import pytest

from hub.domain.access import Capability, check_access, require_access
from hub.domain.error import NotAuthorizedError
from hub.domain.model import Group, GroupMember, Paper, PaperComment
from hub.domain.value import CommentId, GroupId, PaperId, UserId

OWNER = UserId(uuid4())
MEMBER = UserId(uuid4())
OUTSIDER = UserId(uuid4())


def make_group(is_public: bool = True) -> Group:
    return Group(
        id=GroupId(uuid4()),
        name="Neuro Lab",
        description="Reading group",
        owner_id=OWNER,
        members=[GroupMember(user_id=OWNER), GroupMember(user_id=MEMBER)],
        is_public=is_public,
    )


def make_paper(
    group: Group, uploaded_by: UserId = MEMBER, is_public: bool = False
) -> Paper:
    return Paper(
        id=PaperId(uuid4()),
        title="Spiking networks",
        file_name="paper-1.pdf",
        original_file_name="spiking.pdf",
        file_path="uploads/papers/paper-1.pdf",
        file_size=1024,
        mime_type="application/pdf",
        group_id=group.id,
        uploaded_by=uploaded_by,
        is_public=is_public,
    )


class TestGroupCapabilities:
    """View, manage and contribute rules on groups."""

    def test_public_group_visible_to_anyone(self):
        """Anonymous callers can view a public group."""
        assert check_access(None, make_group(), Capability.VIEW_GROUP).allowed

    def test_private_group_hidden_from_outsiders(self):
        """Outsiders cannot view a private group."""
        group = make_group(is_public=False)
        decision = check_access(OUTSIDER, group, Capability.VIEW_GROUP)

        assert not decision.allowed
        assert decision.reason == "Access denied. This is a private group."

    def test_private_group_visible_to_members(self):
        """Members can view their private group."""
        group = make_group(is_public=False)

        assert check_access(MEMBER, group, Capability.VIEW_GROUP).allowed

    def test_only_owner_manages(self):
        """Managing a group is reserved to its owner."""
        group = make_group()

        assert check_access(OWNER, group, Capability.MANAGE_GROUP).allowed
        assert not check_access(MEMBER, group, Capability.MANAGE_GROUP).allowed
        assert not check_access(None, group, Capability.MANAGE_GROUP).allowed

    def test_contribute_requires_membership(self):
        """Outsiders cannot contribute even to a public group."""
        group = make_group()

        assert check_access(MEMBER, group, Capability.CONTRIBUTE).allowed
        assert not check_access(OUTSIDER, group, Capability.CONTRIBUTE).allowed


class TestPaperCapabilities:
    """View and delete rules on papers."""

    def test_public_paper_visible_to_anyone(self):
        """A public paper is visible without membership."""
        group = make_group(is_public=False)
        paper = make_paper(group, is_public=True)

        assert check_access(None, paper, Capability.VIEW_PAPER, group=group).allowed

    def test_private_paper_needs_membership(self):
        """A private paper is hidden from outsiders."""
        group = make_group()
        paper = make_paper(group)

        denied = check_access(OUTSIDER, paper, Capability.VIEW_PAPER, group=group)
        assert not denied.allowed
        assert check_access(MEMBER, paper, Capability.VIEW_PAPER, group=group).allowed

    def test_uploader_and_owner_delete(self):
        """Only the uploader or the group owner may delete a paper."""
        group = make_group()
        paper = make_paper(group, uploaded_by=MEMBER)

        assert check_access(MEMBER, paper, Capability.DELETE_PAPER, group=group).allowed
        assert check_access(OWNER, paper, Capability.DELETE_PAPER, group=group).allowed
        assert not check_access(
            OUTSIDER, paper, Capability.DELETE_PAPER, group=group
        ).allowed


class TestItemCapabilities:
    """Edit and delete rules on comments."""

    def test_edit_is_author_only(self):
        """Even the group owner cannot edit someone else's comment."""
        group = make_group()
        comment = PaperComment(
            id=CommentId(uuid4()),
            paper_id=PaperId(uuid4()),
            author_id=MEMBER,
            content="Nice result",
        )

        assert check_access(MEMBER, comment, Capability.EDIT_ITEM, group=group).allowed
        owner_edit = check_access(OWNER, comment, Capability.EDIT_ITEM, group=group)
        assert not owner_edit.allowed
        assert check_access(OWNER, comment, Capability.DELETE_ITEM, group=group).allowed

    def test_owning_group_required_for_content(self):
        """Checking content without its group is a programming error."""
        group = make_group()
        with pytest.raises(ValueError):
            check_access(MEMBER, make_paper(group), Capability.VIEW_PAPER)

    def test_require_access_raises_with_reason(self):
        """require_access raises NotAuthorizedError carrying the reason."""
        with pytest.raises(NotAuthorizedError, match="Only group owner"):
            require_access(MEMBER, make_group(), Capability.MANAGE_GROUP)
