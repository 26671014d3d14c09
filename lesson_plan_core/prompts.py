# lesson_plan_core/prompts.py

"""
Prompts e instrucciones para la generación de planes de clase.

El prompt es una plantilla fija con dos puntos de sustitución (tema y
duración). Es una función pura: testeable sin red.
"""

DURATION_OPTIONS = ("35 phút", "45 phút")
DEFAULT_DURATION = "45 phút"

LESSON_PLAN_PROMPT_VI = (
    'Dựa vào các tài liệu được cung cấp và chủ đề "{topic}", hãy thiết kế một '
    "kế hoạch bài giảng chi tiết trong {duration}. Kế hoạch cần bao gồm các hoạt "
    "động vui nhộn, sáng tạo và hấp dẫn, phù hợp với mọi đối tượng học sinh. "
    "Vui lòng cấu trúc bài giảng rõ ràng theo từng phần (ví dụ: Khởi động, Hình "
    "thành kiến thức mới, Luyện tập, Vận dụng), ước tính thời gian cho mỗi hoạt "
    'động. Sau mỗi hoạt động, hãy bổ sung thêm mục "Sản phẩm đầu ra" hoặc "Đáp '
    'án" của bài tập. Trình bày kế hoạch dưới dạng văn bản liền mạch, không chia '
    "cột. Sử dụng markdown để định dạng, ví dụ: **để in đậm** và *để in nghiêng*."
)


def build_lesson_plan_prompt(topic: str, duration: str) -> str:
    """
    Arma la instrucción para el LLM.

    El tema y la duración se insertan literales, sin escapar: el consumidor
    es un endpoint de texto, no un intérprete.
    """
    # Sin str.format: el tema puede traer llaves o el propio marcador
    head, rest = LESSON_PLAN_PROMPT_VI.split("{topic}", 1)
    middle, tail = rest.split("{duration}", 1)
    return f"{head}{topic}{middle}{duration}{tail}"
