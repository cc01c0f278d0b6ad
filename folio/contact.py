# folio/contact.py
from __future__ import annotations

import re
from typing import Callable, Dict, Mapping, Optional
from urllib import error, parse, request

from .catalog import fetch_timeout_s
from .dom import Element, Event
from .notify import Toast
from .util.console import eprint

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MSG_SENT = "Message sent successfully! I'll get back to you soon."
MSG_FAILED = "Failed to send message. Please try again or email directly."
MSG_FIX = "Please fix the errors above"
MSG_COPIED = "Email copied to clipboard!"
MSG_COPY_FAILED = "Failed to copy email"


def validate_name(name: str) -> str:
    """Return an error message, or "" when the value is acceptable."""
    v = (name or "").strip()
    if not v:
        return "Name is required"
    if len(v) < 2:
        return "Name must be at least 2 characters"
    return ""


def validate_email(email: str) -> str:
    v = (email or "").strip()
    if not v:
        return "Email is required"
    if not EMAIL_RE.match(v):
        return "Please enter a valid email address"
    return ""


def validate_message(message: str) -> str:
    v = (message or "").strip()
    if not v:
        return "Message is required"
    if len(v) < 10:
        return "Message must be at least 10 characters"
    return ""


VALIDATORS: Dict[str, Callable[[str], str]] = {
    "name": validate_name,
    "email": validate_email,
    "message": validate_message,
}


def validate_fields(fields: Mapping[str, str]) -> Dict[str, str]:
    """Map field name -> error message for every invalid field."""
    errs: Dict[str, str] = {}
    for key, fn in VALIDATORS.items():
        msg = fn(fields.get(key, ""))
        if msg:
            errs[key] = msg
    return errs


ClipboardWriter = Callable[[str], None]
Poster = Callable[[str, Mapping[str, str]], int]


def post_form(url: str, fields: Mapping[str, str]) -> int:
    """POST urlencoded fields; return the HTTP status (0 on transport failure)."""
    data = parse.urlencode(dict(fields)).encode("utf-8")
    req = request.Request(
        url,
        data=data,
        method="POST",
        headers={"Accept": "application/json", "Content-Type": "application/x-www-form-urlencoded"},
    )
    try:
        with request.urlopen(req, timeout=fetch_timeout_s()) as resp:
            return int(resp.status)
    except error.HTTPError as e:
        return int(e.code)
    except (error.URLError, OSError) as e:
        eprint(f"[folio.contact] ERROR: form submission failed: {getattr(e, 'reason', e)}")
        return 0


def copy_email(email: str, write: ClipboardWriter, *, toast: Optional[Toast] = None) -> bool:
    """Put email on the clipboard and report the outcome through the toast."""
    try:
        write(email)
        ok = True
    except (OSError, RuntimeError) as e:
        eprint(f"[folio.contact] ERROR: clipboard write failed: {e}")
        ok = False
    if toast is not None:
        toast.show(MSG_COPIED if ok else MSG_COPY_FAILED)
    return ok


def wire_copy_buttons(root: Element, write: ClipboardWriter, *, toast: Optional[Toast] = None) -> int:
    """Bind every .copy-email control under root; return how many were bound."""
    buttons = root.query_class_all("copy-email")
    for btn in buttons:
        email = btn.attrs.get("data-email", "")
        btn.add_listener("click", lambda event, email=email: copy_email(email, write, toast=toast))
    return len(buttons)


class ContactForm:
    """Binds validation and submission to the contact form mount point."""

    def __init__(
        self,
        form: Element,
        *,
        toast: Optional[Toast] = None,
        poster: Poster = post_form,
        endpoint: Optional[str] = None,
    ):
        self._form = form
        self._toast = toast
        self._poster = poster
        self._endpoint = endpoint or form.attrs.get("action") or ""
        self.submitting = False

        for key in VALIDATORS:
            inp = self._input(key)
            if inp is not None:
                inp.add_listener("blur", self._blur_handler(key))
        form.add_listener("submit", self._on_submit)

    def _input(self, key: str) -> Optional[Element]:
        return self._form.get_by_id(f"contact-{key}")

    def _error_el(self, key: str) -> Optional[Element]:
        return self._form.get_by_id(f"{key}-error")

    def _set_error(self, key: str, msg: str) -> None:
        el = self._error_el(key)
        if el is not None:
            el.text = msg

    def _set_status(self, msg: str, kind: str = "") -> None:
        el = self._form.get_by_id("form-status")
        if el is None:
            return
        el.text = msg
        el.attrs["class"] = f"form-status {kind}".strip()

    def values(self) -> Dict[str, str]:
        out: Dict[str, str] = {}
        for key in VALIDATORS:
            inp = self._input(key)
            out[key] = inp.value if inp is not None else ""
        return out

    def validate(self) -> bool:
        errs = validate_fields(self.values())
        for key in VALIDATORS:
            self._set_error(key, errs.get(key, ""))
        return not errs

    def reset(self) -> None:
        for key in VALIDATORS:
            inp = self._input(key)
            if inp is not None:
                inp.value = ""

    def submit(self) -> bool:
        if not self.validate():
            self._set_status(MSG_FIX, "error")
            return False
        if not self._endpoint:
            eprint("[folio.contact] ERROR: contact form has no endpoint")
            self._set_status(MSG_FAILED, "error")
            return False

        self.submitting = True
        self._set_status("")
        try:
            status = self._poster(self._endpoint, self.values())
        finally:
            self.submitting = False

        ok = 200 <= status < 300
        if ok:
            self._set_status(MSG_SENT, "success")
            self.reset()
        else:
            eprint(f"[folio.contact] ERROR: form endpoint returned status={status}")
            self._set_status(MSG_FAILED, "error")
        if self._toast is not None:
            self._toast.show(MSG_SENT if ok else MSG_FAILED)
        return ok

    def _blur_handler(self, key: str):
        def _blur(event: Event) -> None:
            inp = self._input(key)
            self._set_error(key, VALIDATORS[key](inp.value if inp is not None else ""))

        return _blur

    def _on_submit(self, event: Event) -> None:
        event.prevent_default()
        self.submit()
