"""
Domain Constants: 렌더러 전역 상수.
"""

# =============================================================================
# Template Files
# =============================================================================
# 확장자가 없는 템플릿 이름에는 기본 확장자를 붙인다.
# 예: "emails/welcome" → "emails/welcome.jinja"

TEMPLATE_EXTENSION = ".jinja"

# 경로 구분자 (마지막 세그먼트에서만 확장자 판별)
PATH_SEPARATORS = ("/", "\\")

# =============================================================================
# Variable Store
# =============================================================================
# json_serialize()가 mapping이 아닌 값을 반환하면 이 키 하나에 담는다.

OBJECT_SINGLE_VAR_KEY = "object_single_var"

# 렌더러 하나가 보관하는 최대 경고 수 (오래된 것부터 버림)
RENDER_LOG_MAX_WARNINGS = 100

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CONFIG_FILENAME = "default.yaml"
DEFAULT_CHARSET = "utf-8"
