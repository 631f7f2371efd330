"""Response views shared by several use cases.

Views are plain pydantic models built from domain entities. They never carry
secrets (password hashes, invitation tokens).
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from hub.domain.model import (
    Discussion,
    Group,
    Invitation,
    Paper,
    PaperComment,
    Reply,
    User,
)
from hub.domain.thread import MAX_THREAD_DEPTH, ThreadNode, map_forest
from hub.domain.value import (
    AcademicLevel,
    DiscussionCategory,
    GroupRole,
    InvitationStatus,
    PaperCategory,
    UserId,
    UserRole,
)

Authors = dict[UserId, User]


class AuthorView(BaseModel):
    """Public summary of a user shown next to their content."""

    id: str
    first_name: str
    last_name: str
    full_name: str
    avatar: str | None
    institution: str

    @classmethod
    def from_user(cls, user: User) -> "AuthorView":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            avatar=user.avatar,
            institution=user.institution,
        )


def author_view(authors: Authors, user_id: UserId) -> AuthorView | None:
    """Look up a loaded author. Deleted accounts give None."""
    user = authors.get(user_id)
    return AuthorView.from_user(user) if user else None


class UserView(BaseModel):
    """A user's own profile."""

    id: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    avatar: str | None
    bio: str | None
    phone: str | None
    institution: str
    department: str | None
    field_of_study: str
    academic_level: AcademicLevel
    graduation_year: int | None
    research_interests: list[str]
    skills: list[str]
    social_links: dict[str, Optional[str]]
    preferences: dict[str, Any]
    is_email_verified: bool
    role: UserRole
    last_login: datetime | None
    login_count: int
    profile_completion: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        data = user.model_dump(exclude={"password_hash"})
        return cls.model_validate({**data, "id": str(user.id)})


class MemberView(BaseModel):
    """Group member with profile summary."""

    user_id: str
    joined_at: datetime
    user: AuthorView | None


class GroupView(BaseModel):
    """Group as seen by one caller."""

    id: str
    name: str
    description: str
    owner_id: str
    owner: AuthorView | None
    members: list[MemberView]
    member_count: int
    member_count_text: str
    is_public: bool
    field_of_study: str | None
    created_at: datetime
    updated_at: datetime
    user_role: GroupRole

    @classmethod
    def from_group(
        cls, group: Group, authors: Authors, actor_id: UserId | None = None
    ) -> "GroupView":
        return cls(
            id=str(group.id),
            name=group.name,
            description=group.description,
            owner_id=str(group.owner_id),
            owner=author_view(authors, group.owner_id),
            members=[
                MemberView(
                    user_id=str(member.user_id),
                    joined_at=member.joined_at,
                    user=author_view(authors, member.user_id),
                )
                for member in group.members
            ],
            member_count=group.member_count,
            member_count_text=group.member_count_text,
            is_public=group.is_public,
            field_of_study=group.field_of_study,
            created_at=group.created_at,
            updated_at=group.updated_at,
            user_role=group.role_of(actor_id),
        )


def group_user_ids(groups: list[Group]) -> list[UserId]:
    """Owner and member IDs of the groups, for batch loading."""
    ids: list[UserId] = []
    for group in groups:
        ids.append(group.owner_id)
        ids.extend(member.user_id for member in group.members)
    return ids


class InvitationView(BaseModel):
    """Invitation without its token."""

    id: str
    group_id: str
    email: str
    message: str | None
    status: InvitationStatus
    invited_by: AuthorView | None
    expires_at: datetime
    is_expired: bool
    created_at: datetime

    @classmethod
    def from_invitation(
        cls, invitation: Invitation, authors: Authors
    ) -> "InvitationView":
        return cls(
            id=str(invitation.id),
            group_id=str(invitation.group_id),
            email=invitation.email.root,
            message=invitation.message,
            status=invitation.status,
            invited_by=author_view(authors, invitation.invited_by),
            expires_at=invitation.expires_at,
            is_expired=invitation.is_expired,
            created_at=invitation.created_at,
        )


class RatingView(BaseModel):
    """One rating on a paper."""

    user_id: str
    rating: int
    review: str | None
    created_at: datetime


class PaperView(BaseModel):
    """Paper metadata. File location on disk is not exposed."""

    id: str
    title: str
    description: str | None
    file_name: str
    original_file_name: str
    file_size: int
    file_size_formatted: str
    mime_type: str
    group_id: str
    uploaded_by: AuthorView | None
    authors: list[dict[str, Optional[str]]]
    tags: list[str]
    category: PaperCategory
    journal: str | None
    published_date: datetime | None
    doi: str | None
    url: str | None
    is_public: bool
    download_count: int
    view_count: int
    ratings: list[RatingView]
    average_rating: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_paper(cls, paper: Paper, authors: Authors) -> "PaperView":
        return cls(
            id=str(paper.id),
            title=paper.title,
            description=paper.description,
            file_name=paper.file_name,
            original_file_name=paper.original_file_name,
            file_size=paper.file_size,
            file_size_formatted=paper.file_size_formatted,
            mime_type=paper.mime_type,
            group_id=str(paper.group_id),
            uploaded_by=author_view(authors, paper.uploaded_by),
            authors=[author.model_dump() for author in paper.authors],
            tags=paper.tags,
            category=paper.category,
            journal=paper.journal,
            published_date=paper.published_date,
            doi=paper.doi,
            url=paper.url,
            is_public=paper.is_public,
            download_count=paper.download_count,
            view_count=paper.view_count,
            ratings=[
                RatingView(
                    user_id=str(r.user_id),
                    rating=r.rating,
                    review=r.review,
                    created_at=r.created_at,
                )
                for r in paper.ratings
            ],
            average_rating=paper.average_rating,
            created_at=paper.created_at,
            updated_at=paper.updated_at,
        )


class CommentNode(BaseModel):
    """Comment with the replies nested under it."""

    id: str
    paper_id: str
    author: AuthorView | None
    content: str
    parent_id: str | None
    is_edited: bool
    edited_at: datetime | None
    like_count: int
    liked_by_me: bool
    created_at: datetime
    replies: list["CommentNode"] = Field(default_factory=list)

    @classmethod
    def from_comment(
        cls, comment: PaperComment, authors: Authors, actor_id: UserId | None = None
    ) -> "CommentNode":
        return cls(
            id=str(comment.id),
            paper_id=str(comment.paper_id),
            author=author_view(authors, comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            is_edited=comment.is_edited,
            edited_at=comment.edited_at,
            like_count=comment.like_count,
            liked_by_me=actor_id is not None and actor_id in comment.likes,
            created_at=comment.created_at,
        )


def comment_forest(
    forest: list[ThreadNode[PaperComment]],
    authors: Authors,
    actor_id: UserId | None = None,
) -> list[CommentNode]:
    """Nested comment views in thread order.

    Comments deeper than ``MAX_THREAD_DEPTH`` are listed after their deepest
    shown ancestor; their ``parent_id`` still names the real parent.
    """
    return map_forest(
        forest,
        lambda comment: CommentNode.from_comment(comment, authors, actor_id),
        lambda node: node.replies,
        max_depth=MAX_THREAD_DEPTH,
    )


class LastReplyView(BaseModel):
    """Latest reply on a discussion."""

    author: AuthorView | None
    created_at: datetime


class DiscussionView(BaseModel):
    """Discussion topic."""

    id: str
    group_id: str
    author: AuthorView | None
    title: str
    content: str
    category: DiscussionCategory
    category_display: str
    tags: list[str]
    is_pinned: bool
    is_locked: bool
    reply_count: int
    last_activity: datetime
    last_reply: LastReplyView | None
    created_at: datetime

    @classmethod
    def from_discussion(
        cls, discussion: Discussion, authors: Authors
    ) -> "DiscussionView":
        last_reply = None
        if discussion.last_reply:
            last_reply = LastReplyView(
                author=author_view(authors, discussion.last_reply.author_id),
                created_at=discussion.last_reply.created_at,
            )
        return cls(
            id=str(discussion.id),
            group_id=str(discussion.group_id),
            author=author_view(authors, discussion.author_id),
            title=discussion.title,
            content=discussion.content,
            category=discussion.category,
            category_display=discussion.category_display,
            tags=discussion.tags,
            is_pinned=discussion.is_pinned,
            is_locked=discussion.is_locked,
            reply_count=discussion.reply_count,
            last_activity=discussion.last_activity,
            last_reply=last_reply,
            created_at=discussion.created_at,
        )


def discussion_user_ids(discussions: list[Discussion]) -> list[UserId]:
    """Author and last-replier IDs, for batch loading."""
    ids: list[UserId] = []
    for discussion in discussions:
        ids.append(discussion.author_id)
        if discussion.last_reply:
            ids.append(discussion.last_reply.author_id)
    return ids


class ReplyNode(BaseModel):
    """Reply with the replies nested under it."""

    id: str
    discussion_id: str
    author: AuthorView | None
    content: str
    parent_id: str | None
    is_edited: bool
    edited_at: datetime | None
    like_count: int
    helpful_count: int
    created_at: datetime
    replies: list["ReplyNode"] = Field(default_factory=list)

    @classmethod
    def from_reply(cls, reply: Reply, authors: Authors) -> "ReplyNode":
        return cls(
            id=str(reply.id),
            discussion_id=str(reply.discussion_id),
            author=author_view(authors, reply.author_id),
            content=reply.content,
            parent_id=str(reply.parent_id) if reply.parent_id else None,
            is_edited=reply.is_edited,
            edited_at=reply.edited_at,
            like_count=reply.like_count,
            helpful_count=reply.helpful_count,
            created_at=reply.created_at,
        )


def reply_forest(
    forest: list[ThreadNode[Reply]], authors: Authors
) -> list[ReplyNode]:
    """Nested reply views in thread order, capped like comments."""
    return map_forest(
        forest,
        lambda reply: ReplyNode.from_reply(reply, authors),
        lambda node: node.replies,
        max_depth=MAX_THREAD_DEPTH,
    )
