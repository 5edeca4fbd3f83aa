from html import escape

from rapidjobs.domain.waitlist.entities import EmailMessage

CONFIRMATION_SUBJECT = "You're on the Rapid Job waitlist 🚀"


def confirmation(sender: str, email: str) -> EmailMessage:
    return EmailMessage(
        sender=sender,
        to=[email],
        subject=CONFIRMATION_SUBJECT,
        html=(
            "<div>"
            "<h1>Thanks for joining Rapid Job!</h1>"
            f"<p>We've added <strong>{escape(email)}</strong> to our waiting list "
            "and will notify you when the apps launch.</p>"
            "<p>— Rapid Job Team</p>"
            "</div>"
        ),
    )


def operator_notification(sender: str, owner_email: str, email: str) -> EmailMessage:
    return EmailMessage(
        sender=sender,
        to=[owner_email],
        subject=f"New waitlist signup: {email}",
        html=f"<p>{escape(email)} joined the waitlist</p>",
    )
