import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


def send_contact_notification(message):
    """Email the site owner about a new contact message. Errors propagate."""
    logger.info("Sending contact notification for: %s", message.name)
    subject = f"New Portfolio Message: {message.subject}"
    text = (
        f"From: {message.name}\n"
        f"Email: {message.email}\n"
        f"Subject: {message.subject}\n\n"
        f"{message.message}\n"
    )
    html = render_to_string("core/emails/contact_notification.html", {"m": message})

    mail = EmailMultiAlternatives(
        subject=subject,
        body=text,
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[settings.CONTACT_RECEIVER_EMAIL],
        reply_to=[message.email],
    )
    mail.attach_alternative(html, "text/html")
    sent = mail.send(fail_silently=False)
    logger.info("Contact notification sent (%s)", sent)
    return sent


def notify_quietly(message):
    """Fire-and-forget wrapper: the message is already stored, so a mail failure is only logged."""
    try:
        send_contact_notification(message)
    except Exception:
        logger.exception("Email notification failed for message id=%s", message.pk)
        return False
    return True
