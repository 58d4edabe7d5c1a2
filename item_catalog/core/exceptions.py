"""
카탈로그 코어 예외 정의

라우터는 이 예외들을 HTTP 상태 코드로 변환한다.
"""


class CatalogError(Exception):
    """카탈로그 코어 예외의 기본 클래스"""


class ValidationError(CatalogError):
    """필수 입력값 누락/빈 값"""


class InvalidReference(CatalogError):
    """형식이 잘못된 이미지 참조 (확장자 누락, 경로 포함 등)"""


class CategoryResolutionError(CatalogError):
    """경합 이외의 이유로 카테고리 조회/생성 실패"""


class StorageError(CatalogError):
    """DB/파일시스템 접근 실패"""
