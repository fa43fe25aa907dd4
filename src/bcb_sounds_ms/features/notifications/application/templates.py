"""Email bodies for order and contact notifications."""

from dataclasses import dataclass
from html import escape

from bcb_sounds_ms.features.checkout.domain import CheckoutSession, package_display_name
from bcb_sounds_ms.features.contact.domain import ContactSubmission
from bcb_sounds_ms.shared.domain.money import format_money

BRAND = "BCB Sounds"
SUPPORT_ADDRESS = "hello@bcbsounds.com"


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    html: str
    text: str


def order_confirmation(session: CheckoutSession) -> RenderedEmail:
    package = package_display_name(session.package_type or "")
    original_price = format_money(session.metadata["originalPrice"])
    total = format_money(session.amount_paid)

    # Unknown codes are recorded but take nothing off
    if session.has_discount and session.discount_amount > 0:
        discount = format_money(session.discount_amount)
        price_html = (
            f"<p><strong>Discount Applied:</strong> {escape(session.discount_code)} (-{discount})</p>\n"
            f"<p><strong>Final Price:</strong> {total}</p>"
        )
        price_text = f"Discount Applied: {session.discount_code} (-{discount})\nFinal Price: {total}"
    else:
        price_html = f"<p><strong>Total Paid:</strong> {total}</p>"
        price_text = f"Total Paid: {total}"

    html = f"""<!DOCTYPE html>
<html>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
  <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
    <h1 style="background: #e63946; color: white; padding: 20px; text-align: center;">Thank You for Your Order!</h1>
    <p>Hi there,</p>
    <p>We've received your order and our AI is already hard at work creating your custom music!</p>
    <h2>Order Details</h2>
    <p><strong>Package:</strong> {escape(package)}</p>
    <p><strong>Original Price:</strong> {original_price}</p>
    {price_html}
    <h3>What Happens Next?</h3>
    <ol>
      <li>Our AI will generate your custom track within 48-72 hours</li>
      <li>You'll receive an email with download links once ready</li>
      <li>Your track comes with full commercial rights</li>
    </ol>
    <p>Need to make changes or have questions? Just reply to this email!</p>
    <p style="text-align: center; font-size: 14px; color: #666;">{BRAND} - AI-Powered Music Creation<br>{SUPPORT_ADDRESS}</p>
  </div>
</body>
</html>"""

    text = (
        "Thank you for your order!\n\n"
        f"Package: {package}\n"
        f"Original Price: {original_price}\n"
        f"{price_text}\n\n"
        "Our AI will generate your custom track within 48-72 hours. "
        "You'll receive an email with download links once ready.\n\n"
        f"{BRAND} - {SUPPORT_ADDRESS}"
    )

    return RenderedEmail(
        subject="Order Confirmation - Your AI Music is Being Created! 🎵",
        html=html,
        text=text,
    )


def admin_order_alert(session: CheckoutSession) -> RenderedEmail:
    total = format_money(session.amount_paid)
    package = session.package_type or "unknown"
    customer = session.customer_email or "unknown"

    html = f"""<h2>New Order Received!</h2>
<p><strong>Customer Email:</strong> {escape(customer)}</p>
<p><strong>Package:</strong> {escape(package)}</p>
<p><strong>Amount:</strong> {total}</p>
<p><strong>Discount Used:</strong> {escape(session.discount_code)}</p>
<p><strong>Session ID:</strong> {escape(session.id)}</p>
<hr>
<p>Log into Stripe Dashboard to view full details.</p>"""

    text = (
        "New order received\n"
        f"Customer Email: {customer}\n"
        f"Package: {package}\n"
        f"Amount: {total}\n"
        f"Discount Used: {session.discount_code}\n"
        f"Session ID: {session.id}\n"
    )

    return RenderedEmail(
        subject=f"New Order: {package} Package - {total}",
        html=html,
        text=text,
    )


def contact_relay(submission: ContactSubmission) -> RenderedEmail:
    message_html = escape(submission.message).replace("\r\n", "\n").replace("\n", "<br>")

    html = f"""<h2>New Contact Form Submission</h2>
<p><strong>Name:</strong> {escape(submission.name)}</p>
<p><strong>Email:</strong> {escape(submission.email)}</p>
<p><strong>Project Type:</strong> {escape(submission.project_type)}</p>
<hr>
<p><strong>Message:</strong></p>
<p>{message_html}</p>
<hr>
<p style="font-size: 12px; color: #666;">You can reply directly to this email to respond to the customer.</p>"""

    text = (
        f"Name: {submission.name}\n"
        f"Email: {submission.email}\n"
        f"Project Type: {submission.project_type}\n\n"
        f"{submission.message}\n"
    )

    return RenderedEmail(
        subject=f"New Contact Form Submission - {submission.project_type}",
        html=html,
        text=text,
    )


def contact_auto_reply(submission: ContactSubmission, frontend_url: str) -> RenderedEmail:
    base = frontend_url.rstrip("/")

    html = f"""<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #e63946;">Thank you for contacting {BRAND}!</h2>
  <p>Hi {escape(submission.name)},</p>
  <p>We've received your message and will get back to you within 24 hours.</p>
  <p>In the meantime, feel free to:</p>
  <ul>
    <li>Check out our <a href="{base}/samples">sample library</a></li>
    <li>Use our <a href="{base}/pricing">pricing calculator</a></li>
    <li>Learn more about our <a href="{base}/services">services</a></li>
  </ul>
  <p>Looking forward to creating amazing AI music for your project!</p>
  <p>Best regards,<br>The {BRAND} Team</p>
</div>"""

    text = (
        f"Hi {submission.name},\n\n"
        "We've received your message and will get back to you within 24 hours.\n\n"
        f"Samples: {base}/samples\n"
        f"Pricing: {base}/pricing\n"
        f"Services: {base}/services\n\n"
        f"Best regards,\nThe {BRAND} Team"
    )

    return RenderedEmail(
        subject=f"We've Received Your Message - {BRAND}",
        html=html,
        text=text,
    )
