"""Application layer DI providers."""

from dishka import Scope, provide

from hub.application.usecase.auth import (
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
    GetStatsUseCase,
    LoginUseCase,
    RegisterUseCase,
    UpdateProfileUseCase,
)
from hub.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetCommentsUseCase,
    LikeCommentUseCase,
)
from hub.application.usecase.discussion import (
    CreateDiscussionUseCase,
    CreateReplyUseCase,
    EditReplyUseCase,
    GetDiscussionUseCase,
    ListDiscussionsUseCase,
    ReactToReplyUseCase,
)
from hub.application.usecase.group import (
    CreateGroupUseCase,
    DeleteGroupUseCase,
    GetGroupUseCase,
    GetMyGroupsUseCase,
    JoinGroupUseCase,
    LeaveGroupUseCase,
    ListGroupsUseCase,
    RemoveMemberUseCase,
    UpdateGroupUseCase,
)
from hub.application.usecase.invitation import (
    AcceptInvitationUseCase,
    ListInvitationsUseCase,
    SendInvitationUseCase,
)
from hub.application.usecase.paper import (
    DeletePaperUseCase,
    DownloadPaperUseCase,
    GetPaperUseCase,
    ListPapersUseCase,
    RatePaperUseCase,
    UploadPaperUseCase,
)
from hub.domain.service import (
    AuthService,
    CommentService,
    DiscussionService,
    GroupService,
    InvitationService,
    JWTService,
    PaperService,
    ReplyService,
    UserService,
)
from hub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self,
        user_service: UserService,
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        user_service: UserService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_stats_use_case(
        self,
        user_service: UserService,
    ) -> GetStatsUseCase:
        """Provide get stats use case."""
        return GetStatsUseCase(
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        auth_service: AuthService,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service,
            auth_service=auth_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        user_service: UserService,
        auth_service: AuthService,
        jwt_service: JWTService,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service,
            auth_service=auth_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self,
        user_service: UserService,
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(
            user_service=user_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            group_service=group_service,
            paper_service=paper_service,
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            group_service=group_service,
            paper_service=paper_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(
            group_service=group_service,
            paper_service=paper_service,
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_comments_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            group_service=group_service,
            paper_service=paper_service,
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(
            group_service=group_service,
            paper_service=paper_service,
            comment_service=comment_service,
        )

    # Discussion use cases
    @provide(scope=Scope.REQUEST)
    def get_create_discussion_use_case(
        self,
        group_service: GroupService,
        discussion_service: DiscussionService,
        user_service: UserService,
    ) -> CreateDiscussionUseCase:
        """Provide create discussion use case."""
        return CreateDiscussionUseCase(
            group_service=group_service,
            discussion_service=discussion_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self,
        discussion_service: DiscussionService,
        reply_service: ReplyService,
        group_service: GroupService,
        user_service: UserService,
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            discussion_service=discussion_service,
            reply_service=reply_service,
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_reply_use_case(
        self,
        discussion_service: DiscussionService,
        reply_service: ReplyService,
        group_service: GroupService,
        user_service: UserService,
    ) -> EditReplyUseCase:
        """Provide edit reply use case."""
        return EditReplyUseCase(
            discussion_service=discussion_service,
            reply_service=reply_service,
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_discussion_use_case(
        self,
        discussion_service: DiscussionService,
        reply_service: ReplyService,
        group_service: GroupService,
        user_service: UserService,
    ) -> GetDiscussionUseCase:
        """Provide get discussion use case."""
        return GetDiscussionUseCase(
            discussion_service=discussion_service,
            reply_service=reply_service,
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_discussions_use_case(
        self,
        group_service: GroupService,
        discussion_service: DiscussionService,
        user_service: UserService,
    ) -> ListDiscussionsUseCase:
        """Provide list discussions use case."""
        return ListDiscussionsUseCase(
            group_service=group_service,
            discussion_service=discussion_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_react_to_reply_use_case(
        self,
        discussion_service: DiscussionService,
        reply_service: ReplyService,
        group_service: GroupService,
    ) -> ReactToReplyUseCase:
        """Provide react to reply use case."""
        return ReactToReplyUseCase(
            discussion_service=discussion_service,
            reply_service=reply_service,
            group_service=group_service,
        )

    # Group use cases
    @provide(scope=Scope.REQUEST)
    def get_create_group_use_case(
        self,
        group_service: GroupService,
        user_service: UserService,
    ) -> CreateGroupUseCase:
        """Provide create group use case."""
        return CreateGroupUseCase(
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_group_use_case(
        self,
        group_service: GroupService,
    ) -> DeleteGroupUseCase:
        """Provide delete group use case."""
        return DeleteGroupUseCase(
            group_service=group_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_group_use_case(
        self,
        group_service: GroupService,
        user_service: UserService,
    ) -> GetGroupUseCase:
        """Provide get group use case."""
        return GetGroupUseCase(
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_my_groups_use_case(
        self,
        group_service: GroupService,
        user_service: UserService,
    ) -> GetMyGroupsUseCase:
        """Provide get my groups use case."""
        return GetMyGroupsUseCase(
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_groups_use_case(
        self,
        group_service: GroupService,
        user_service: UserService,
    ) -> ListGroupsUseCase:
        """Provide list groups use case."""
        return ListGroupsUseCase(
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_join_group_use_case(
        self,
        group_service: GroupService,
        user_service: UserService,
    ) -> JoinGroupUseCase:
        """Provide join group use case."""
        return JoinGroupUseCase(
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_leave_group_use_case(
        self,
        group_service: GroupService,
    ) -> LeaveGroupUseCase:
        """Provide leave group use case."""
        return LeaveGroupUseCase(
            group_service=group_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_member_use_case(
        self,
        group_service: GroupService,
        user_service: UserService,
    ) -> RemoveMemberUseCase:
        """Provide remove member use case."""
        return RemoveMemberUseCase(
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_group_use_case(
        self,
        group_service: GroupService,
        user_service: UserService,
    ) -> UpdateGroupUseCase:
        """Provide update group use case."""
        return UpdateGroupUseCase(
            group_service=group_service,
            user_service=user_service,
        )

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_accept_invitation_use_case(
        self,
        invitation_service: InvitationService,
        group_service: GroupService,
        user_service: UserService,
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(
            invitation_service=invitation_service,
            group_service=group_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self,
        group_service: GroupService,
        invitation_service: InvitationService,
        user_service: UserService,
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            group_service=group_service,
            invitation_service=invitation_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_send_invitation_use_case(
        self,
        group_service: GroupService,
        user_service: UserService,
        invitation_service: InvitationService,
    ) -> SendInvitationUseCase:
        """Provide send invitation use case."""
        return SendInvitationUseCase(
            group_service=group_service,
            user_service=user_service,
            invitation_service=invitation_service,
        )

    # Paper use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_paper_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
    ) -> DeletePaperUseCase:
        """Provide delete paper use case."""
        return DeletePaperUseCase(
            group_service=group_service,
            paper_service=paper_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_download_paper_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
    ) -> DownloadPaperUseCase:
        """Provide download paper use case."""
        return DownloadPaperUseCase(
            group_service=group_service,
            paper_service=paper_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_paper_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        user_service: UserService,
    ) -> GetPaperUseCase:
        """Provide get paper use case."""
        return GetPaperUseCase(
            group_service=group_service,
            paper_service=paper_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_papers_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        user_service: UserService,
    ) -> ListPapersUseCase:
        """Provide list papers use case."""
        return ListPapersUseCase(
            group_service=group_service,
            paper_service=paper_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_rate_paper_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        user_service: UserService,
    ) -> RatePaperUseCase:
        """Provide rate paper use case."""
        return RatePaperUseCase(
            group_service=group_service,
            paper_service=paper_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_upload_paper_use_case(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        user_service: UserService,
    ) -> UploadPaperUseCase:
        """Provide upload paper use case."""
        return UploadPaperUseCase(
            group_service=group_service,
            paper_service=paper_service,
            user_service=user_service,
        )
