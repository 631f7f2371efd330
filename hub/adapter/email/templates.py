"""Email bodies."""

from html import escape
from typing import Optional

from hub.adapter.email.sender import OutgoingEmail

INVITATION_HTML = """\
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Research Group Invitation</title></head>
<body style="font-family: sans-serif; line-height: 1.6; color: #333;">
  <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
    <h1>Research Group Invitation</h1>
    <p>Hello {recipient_name}!</p>
    <p><strong>{sender_name}</strong> has invited you to join the research group:</p>
    <h2>{group_name}</h2>
    <p>{group_description}</p>
    {personal_message}
    <p><a href="{invite_link}">Join Research Group</a></p>
    <p><small>This invitation link will expire in {expiry_days} days.</small></p>
    <p style="color: #6b7280;">If you didn't expect this invitation, you can safely ignore this email.</p>
  </div>
</body>
</html>
"""

INVITATION_TEXT = """\
Research Group Invitation

Hello {recipient_name}!

{sender_name} has invited you to join the research group: {group_name}

{group_description}
{personal_message}
Click here to join: {invite_link}

This invitation link will expire in {expiry_days} days.

If you didn't expect this invitation, you can safely ignore this email.
"""


def invitation_email(
    recipient: str,
    sender_name: str,
    group_name: str,
    group_description: str,
    invite_link: str,
    expiry_days: int,
    personal_message: Optional[str] = None,
    recipient_name: str = "Researcher",
) -> OutgoingEmail:
    """Build the group invitation email."""
    html_message = (
        f"<blockquote><em>{escape(personal_message)}</em></blockquote>"
        if personal_message
        else ""
    )
    text_message = f'\nPersonal message: "{personal_message}"\n' if personal_message else ""

    return OutgoingEmail(
        to=recipient,
        subject=f'Invitation to join "{group_name}" research group',
        html=INVITATION_HTML.format(
            recipient_name=escape(recipient_name),
            sender_name=escape(sender_name),
            group_name=escape(group_name),
            group_description=escape(group_description),
            personal_message=html_message,
            invite_link=escape(invite_link, quote=True),
            expiry_days=expiry_days,
        ),
        text=INVITATION_TEXT.format(
            recipient_name=recipient_name,
            sender_name=sender_name,
            group_name=group_name,
            group_description=group_description,
            personal_message=text_message,
            invite_link=invite_link,
            expiry_days=expiry_days,
        ),
    )
