import logging
import typing
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from samesite_cookies.attributes import SameSite
from samesite_cookies.compatibility import CompatibilityClassifier, default_classifier
from samesite_cookies.headers import HeaderRecord, append_labels, cookie_name, missing_labels, strip_attribute

__all__ = ["SameSiteMiddleware"]

logger = logging.getLogger(__name__)


class SameSiteMiddleware:
    """
    Adjust cookies set by other components (e.g. the session middleware) to the client's SameSite support.

    Compatible clients get the missing HttpOnly, Secure and SameSite labels appended,
    incompatible clients get any SameSite attribute removed.
    When `cookie_names` is None every cookie is processed.
    """

    def __init__(
        self,
        app: ASGIApp,
        cookie_names: typing.Iterable[str] | None = None,
        samesite: SameSite | str = SameSite.LAX,
        secure: bool = False,
        httponly: bool = False,
        classifier: CompatibilityClassifier | None = None,
    ) -> None:
        self.app = app
        self.cookie_names = set(cookie_names) if cookie_names is not None else None
        self.samesite = SameSite.parse(samesite)
        self.secure = secure or self.samesite == SameSite.NONE
        self.httponly = httponly
        self.classifier = classifier or default_classifier

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        compatible = self.classifier.is_compatible(Headers(scope=scope).get("user-agent", ""))

        async def sender(message: Message) -> None:
            if message["type"] == "http.response.start":
                records = [HeaderRecord.from_raw(raw) for raw in message.get("headers", [])]
                message["headers"] = [self.rewrite(record, compatible).to_raw() for record in records]
            await send(message)

        await self.app(scope, receive, sender)

    def should_process(self, record: HeaderRecord) -> bool:
        if not record.is_set_cookie:
            return False
        return self.cookie_names is None or cookie_name(record.value) in self.cookie_names

    def rewrite(self, record: HeaderRecord, compatible: bool) -> HeaderRecord:
        if not self.should_process(record):
            return record

        if not compatible:
            return HeaderRecord(record.name, strip_attribute(record.value, "SameSite"))

        labels = missing_labels(record.value, httponly=self.httponly, secure=self.secure, samesite=self.samesite)
        if self.samesite == SameSite.UNSET:
            labels = [label for label in labels if not label.startswith("; SameSite=")]
        if labels:
            logger.debug('Added "%s" to Set-Cookie header of "%s".', "".join(labels), cookie_name(record.value))
        return HeaderRecord(record.name, append_labels(record.value, labels))
