"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from hub.domain.model import (
    Discussion,
    Group,
    GroupMember,
    Invitation,
    LastReply,
    Paper,
    PaperAuthor,
    PaperComment,
    PaperRating,
    Reply,
    SocialLinks,
    User,
    UserPreferences,
)
from hub.domain.value import (
    AcademicLevel,
    CommentId,
    DiscussionCategory,
    DiscussionId,
    Email,
    GroupId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    PaperCategory,
    PaperId,
    ReplyId,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _uuids(values: Any) -> list[UserId]:
    return [UserId(_uuid(v)) for v in values or []]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        avatar=row.get("avatar"),
        bio=row.get("bio"),
        phone=row.get("phone"),
        institution=row["institution"],
        department=row.get("department"),
        field_of_study=row["field_of_study"],
        academic_level=AcademicLevel(row["academic_level"]),
        graduation_year=row.get("graduation_year"),
        research_interests=list(row.get("research_interests") or []),
        skills=list(row.get("skills") or []),
        social_links=SocialLinks(**(row.get("social_links") or {})),
        preferences=UserPreferences(**(row.get("preferences") or {})),
        is_email_verified=row["is_email_verified"],
        is_active=row["is_active"],
        role=UserRole(row["role"]),
        last_login=row.get("last_login"),
        login_count=row["login_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump(exclude={"full_name", "profile_completion"})
    data["email"] = user.email.root
    data["academic_level"] = user.academic_level.value
    data["role"] = user.role.value
    data["social_links"] = user.social_links.model_dump(mode="json")
    data["preferences"] = user.preferences.model_dump(mode="json")
    return data


def row_to_group(row: Dict[str, Any], member_rows: list[Dict[str, Any]]) -> Group:
    """Convert a group row and its member rows to a Group.

    Args:
        row: Group row as dict
        member_rows: group_members rows, in join order

    Returns:
        Group domain model
    """
    return Group(
        id=GroupId(_uuid(row["id"])),
        name=row["name"],
        description=row["description"],
        owner_id=UserId(_uuid(row["owner_id"])),
        members=[
            GroupMember(user_id=UserId(_uuid(m["user_id"])), joined_at=m["joined_at"])
            for m in member_rows
        ],
        is_public=row["is_public"],
        field_of_study=row.get("field_of_study"),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def group_to_dict(group: Group) -> Dict[str, Any]:
    """Convert Group to a groups row. Members are stored separately."""
    return group.model_dump(exclude={"members", "member_count", "member_count_text"})


def members_to_rows(group: Group) -> list[Dict[str, Any]]:
    """Convert a group's members to group_members rows."""
    return [
        {"group_id": group.id, "user_id": m.user_id, "joined_at": m.joined_at}
        for m in group.members
    ]


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        group_id=GroupId(_uuid(row["group_id"])),
        invited_by=UserId(_uuid(row["invited_by"])),
        email=Email(row["email"]),
        message=row.get("message"),
        token=InvitationToken(row["token"]),
        status=InvitationStatus(row["status"]),
        expires_at=row["expires_at"],
        accepted_at=row.get("accepted_at"),
        accepted_by=(
            UserId(_uuid(row["accepted_by"])) if row.get("accepted_by") else None
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict."""
    data = invitation.model_dump(exclude={"is_expired"})
    data["email"] = invitation.email.root
    data["token"] = invitation.token.root
    data["status"] = invitation.status.value
    return data


def row_to_paper(row: Dict[str, Any], rating_rows: list[Dict[str, Any]]) -> Paper:
    """Convert a paper row and its rating rows to a Paper.

    Args:
        row: Paper row as dict
        rating_rows: paper_ratings rows, oldest first

    Returns:
        Paper domain model
    """
    return Paper(
        id=PaperId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        file_name=row["file_name"],
        original_file_name=row["original_file_name"],
        file_path=row["file_path"],
        file_size=row["file_size"],
        mime_type=row["mime_type"],
        group_id=GroupId(_uuid(row["group_id"])),
        uploaded_by=UserId(_uuid(row["uploaded_by"])),
        authors=[PaperAuthor(**a) for a in row.get("authors") or []],
        tags=list(row.get("tags") or []),
        category=PaperCategory(row["category"]),
        journal=row.get("journal"),
        published_date=row.get("published_date"),
        doi=row.get("doi"),
        url=row.get("url"),
        is_public=row["is_public"],
        download_count=row["download_count"],
        view_count=row["view_count"],
        ratings=[
            PaperRating(
                user_id=UserId(_uuid(r["user_id"])),
                rating=r["rating"],
                review=r.get("review"),
                created_at=r["created_at"],
            )
            for r in rating_rows
        ],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def paper_to_dict(paper: Paper) -> Dict[str, Any]:
    """Convert Paper to a papers row. Ratings are stored separately."""
    data = paper.model_dump(
        exclude={"ratings", "average_rating", "file_size_formatted"}
    )
    data["authors"] = [a.model_dump(mode="json") for a in paper.authors]
    data["category"] = paper.category.value
    return data


def ratings_to_rows(paper: Paper) -> list[Dict[str, Any]]:
    """Convert a paper's ratings to paper_ratings rows."""
    return [
        {
            "paper_id": paper.id,
            "user_id": r.user_id,
            "rating": r.rating,
            "review": r.review,
            "created_at": r.created_at,
        }
        for r in paper.ratings
    ]


def row_to_comment(row: Dict[str, Any]) -> PaperComment:
    """Convert database row to PaperComment domain model."""
    return PaperComment(
        id=CommentId(_uuid(row["id"])),
        paper_id=PaperId(_uuid(row["paper_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        likes=_uuids(row.get("likes")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: PaperComment) -> Dict[str, Any]:
    """Convert PaperComment domain model to database dict."""
    return comment.model_dump(exclude={"like_count"})


def row_to_discussion(row: Dict[str, Any]) -> Discussion:
    """Convert database row to Discussion domain model."""
    last_reply = None
    if row.get("last_reply_author_id") and row.get("last_reply_at"):
        last_reply = LastReply(
            author_id=UserId(_uuid(row["last_reply_author_id"])),
            created_at=row["last_reply_at"],
        )
    return Discussion(
        id=DiscussionId(_uuid(row["id"])),
        group_id=GroupId(_uuid(row["group_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        category=DiscussionCategory(row["category"]),
        tags=list(row.get("tags") or []),
        is_pinned=row["is_pinned"],
        is_locked=row["is_locked"],
        reply_count=row["reply_count"],
        last_activity=row["last_activity"],
        last_reply=last_reply,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def discussion_to_dict(discussion: Discussion) -> Dict[str, Any]:
    """Convert Discussion domain model to database dict."""
    data = discussion.model_dump(exclude={"last_reply", "category_display"})
    data["category"] = discussion.category.value
    data["last_reply_author_id"] = (
        discussion.last_reply.author_id if discussion.last_reply else None
    )
    data["last_reply_at"] = (
        discussion.last_reply.created_at if discussion.last_reply else None
    )
    return data


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(_uuid(row["id"])),
        discussion_id=DiscussionId(_uuid(row["discussion_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=ReplyId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        likes=_uuids(row.get("likes")),
        helpful=_uuids(row.get("helpful")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict."""
    return reply.model_dump(exclude={"like_count", "helpful_count"})
