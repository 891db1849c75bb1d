from translated_sms.senders.base import MessageSender
from translated_sms.senders.twilio_sms import TwilioSender

__all__ = ["MessageSender", "TwilioSender"]
