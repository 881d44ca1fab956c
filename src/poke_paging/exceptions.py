"""poke_paging ライブラリの例外型定義"""

from __future__ import annotations


class PagingError(Exception):
    """poke_paging ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class PagingErrorCodes:
    """PagingError のエラーコード定数。"""

    TRANSPORT_ERROR: str = "TRANSPORT_ERROR"
    MALFORMED_RESPONSE: str = "MALFORMED_RESPONSE"
    MALFORMED_CURSOR: str = "MALFORMED_CURSOR"
    INVALID_STATE: str = "INVALID_STATE"
    INVALID_CONFIG: str = "INVALID_CONFIG"


class TransportError(PagingError):
    """ネットワーク障害または HTTP エラーステータス。"""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(PagingErrorCodes.TRANSPORT_ERROR, message, cause)
        self.status_code = status_code


class MalformedResponseError(PagingError):
    """レスポンスボディが空、または封筒形式として解釈できない。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(PagingErrorCodes.MALFORMED_RESPONSE, message, cause)


class MalformedCursorError(PagingError):
    """カーソル文字列からページパラメータを取り出せない。"""

    def __init__(self, cursor: str, message: str) -> None:
        super().__init__(PagingErrorCodes.MALFORMED_CURSOR, f"{message}: {cursor!r}")
        self.cursor = cursor


class PagingStateError(PagingError):
    """現在の状態では実行できない操作。"""

    def __init__(self, message: str) -> None:
        super().__init__(PagingErrorCodes.INVALID_STATE, message)


class PagingConfigError(PagingError):
    """ページング定数が範囲外。"""

    def __init__(self, message: str) -> None:
        super().__init__(PagingErrorCodes.INVALID_CONFIG, message)


class ConfigError(Exception):
    """設定ファイル読み込みのエラー。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ConfigErrorCodes:
    """ConfigError のエラーコード定数。"""

    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"
