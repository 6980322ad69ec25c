"""변환 요청 처리 중 발생하는 예외 — HTTP 상태 코드와 공개 메시지를 함께 가집니다."""


class ConvertError(RuntimeError):
    status_code = 500
    public_message = "服务器内部错误"


class InputValidationError(ConvertError):
    """요청 본문이 비어 있거나 형식이 잘못된 경우."""

    status_code = 400
    public_message = "请输入要转换的内容"


class ConfigurationError(ConvertError):
    """선택된 LLM 제공자의 API 키 등 필수 설정이 없는 경우."""

    public_message = "服务器配置错误"


class UpstreamServiceError(ConvertError):
    """LLM API가 오류를 반환한 경우. details는 클라이언트에 그대로 전달됩니다."""

    public_message = "AI服务错误"

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details


class MalformedResponseError(ConvertError):
    public_message = "AI返回数据格式错误"
