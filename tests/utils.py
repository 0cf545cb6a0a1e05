import typing

from samesite_cookies.attributes import CookieAttributes
from samesite_cookies.headers import HeaderRecord

CHROME_80 = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/80.0.3987.132 Safari/537.36"
)
CHROME_66 = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/66.0.3359.181 Safari/537.36"
)
CRIOS_66 = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 13_3 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) "
    "CriOS/66.0.3359.122 Mobile/15E148 Safari/604.1"
)
CRIOS_67 = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 13_3 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) "
    "CriOS/67.0.3396.87 Mobile/15E148 Safari/604.1"
)
IOS_12 = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 12_4 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) "
    "Version/12.1.2 Mobile/15E148 Safari/604.1"
)
IOS_13 = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 13_3 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) "
    "Version/13.0.4 Mobile/15E148 Safari/604.1"
)
SAFARI_MOJAVE = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_14_6) AppleWebKit/605.1.15 (KHTML, like Gecko) "
    "Version/12.1.2 Safari/605.1.15"
)
EMBEDDED_MOJAVE = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_14_6) AppleWebKit/605.1.15 (KHTML, like Gecko)"
SAFARI_CATALINA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_3) AppleWebKit/605.1.15 (KHTML, like Gecko) "
    "Version/13.0.5 Safari/605.1.15"
)
FIREFOX_MOJAVE = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.14; rv:72.0) Gecko/20100101 Firefox/72.0"
UC_BROWSER_BROKEN = (
    "Mozilla/5.0 (Linux; U; Android 9; en-US) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Version/4.0 UCBrowser/12.13.2.1208 Mobile Safari/537.36"
)
UC_BROWSER_FIXED = (
    "Mozilla/5.0 (Linux; U; Android 9; en-US) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Version/4.0 UCBrowser/12.13.4.1214 Mobile Safari/537.36"
)


class StagedHeadersEnvironment:
    """An environment that stages raw header records in a list.

    `prefix_labels` are written by the legacy primitive as if the platform added them itself,
    `suppress` drops the header and `accept` is the primitive's result."""

    def __init__(
        self,
        user_agent: str = "",
        headers: typing.Iterable[HeaderRecord] = (),
        prefix_labels: str = "",
        suppress: bool = False,
        accept: bool = True,
    ) -> None:
        self.user_agent = user_agent
        self.headers = list(headers)
        self.prefix_labels = prefix_labels
        self.suppress = suppress
        self.accept = accept
        self.replays = 0

    def set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> bool:  # pragma: nocover
        raise AssertionError("Native primitive must not be used.")

    def set_legacy_cookie(
        self, name: str, value: str, expires: typing.Any, path: str | None, domain: str | None
    ) -> bool:
        if self.accept and not self.suppress:
            self.headers.append(HeaderRecord("Set-Cookie", f"{name}={value}{self.prefix_labels}"))
        return self.accept

    def header_list(self) -> list[HeaderRecord]:
        return list(self.headers)

    def remove_headers(self) -> None:
        self.replays += 1
        self.headers.clear()

    def add_header(self, record: HeaderRecord) -> None:
        self.headers.append(record)
