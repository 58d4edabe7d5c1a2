import hashlib
import io
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO, Union

from item_catalog.core.config import settings
from item_catalog.core.exceptions import InvalidReference, StorageError

logger = logging.getLogger(__name__)

# 패키지에 포함된 기본 이미지
BUNDLED_DEFAULT_IMAGE = Path(__file__).resolve().parents[1] / "assets" / "default.jpg"

CHUNK_SIZE = 64 * 1024

# 저장된 이미지 권한 (mkstemp 기본값 0o600 대신)
IMAGE_FILE_MODE = 0o644


# 참조 형식 검증 (파일시스템 확인 전): 확장자 필수, 경로 구분자/숨김 파일 불가
def validate_reference(reference: str, extension: str) -> str:
    if (
        not reference
        or not reference.endswith(extension)
        or "/" in reference
        or "\\" in reference
        or reference.startswith(".")
    ):
        raise InvalidReference(f"Image reference must be a file name ending with {extension}: {reference!r}")
    return reference


class ImageStore:
    """
    내용 주소 기반(content-addressed) 이미지 저장소

    이미지 바이트의 SHA-256 해시 + 확장자를 참조로 사용하며,
    같은 바이트는 한 번만 저장한다. 디렉터리는 추가만 하고 수정/삭제하지 않는다.
    """

    def __init__(self, image_dir: Union[str, Path], extension: str = ".jpg", default_name: str = "default.jpg"):
        self.image_dir = Path(image_dir)
        self.extension = extension
        self.default_name = default_name

    @property
    def default_path(self) -> Path:
        return self.image_dir / self.default_name

    # 기본 이미지 보장 (서버 시작 시)
    def ensure_default(self) -> Path:
        self.image_dir.mkdir(parents=True, exist_ok=True)
        if not self.default_path.exists():
            shutil.copyfile(BUNDLED_DEFAULT_IMAGE, self.default_path)
            logger.info("기본 이미지 생성: %s", self.default_path)
        return self.default_path

    # 이미지 저장 후 참조 반환 (같은 해시 파일이 있으면 그대로 둠)
    # 업로드 스트림 읽기 실패는 OSError 그대로, 저장소 쓰기 실패는 StorageError
    def store(self, image: Union[bytes, BinaryIO]) -> str:
        stream = io.BytesIO(image) if isinstance(image, (bytes, bytearray)) else image

        try:
            self.image_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.image_dir, prefix=".upload-")
        except OSError as e:
            raise StorageError(f"Could not write to image directory {self.image_dir}") from e

        hasher = hashlib.sha256()
        try:
            # 해시 계산과 동시에 임시 파일에 기록
            with os.fdopen(fd, "wb") as tmp:
                while True:
                    chunk = stream.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    hasher.update(chunk)
                    self._write(tmp, chunk)

            reference = hasher.hexdigest() + self.extension
            target = self.image_dir / reference

            # 존재 여부만 확인 (동일 해시 = 동일 내용)
            if target.exists():
                logger.debug("이미 저장된 이미지 재사용: %s", reference)
            else:
                try:
                    os.chmod(tmp_name, IMAGE_FILE_MODE)
                    os.replace(tmp_name, target)
                except OSError as e:
                    raise StorageError(f"Could not store image {reference}") from e
                logger.info("이미지 저장: %s", reference)
            return reference
        finally:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)

    @staticmethod
    def _write(tmp: BinaryIO, chunk: bytes) -> None:
        try:
            tmp.write(chunk)
        except OSError as e:
            raise StorageError("Could not write image bytes") from e

    def validate_reference(self, reference: str) -> str:
        return validate_reference(reference, self.extension)

    # 참조 → 파일 경로 (없거나 형식 오류면 기본 이미지)
    def resolve(self, reference: str) -> Path:
        try:
            path = self.image_dir / self.validate_reference(reference)
        except InvalidReference as e:
            logger.debug("잘못된 이미지 참조, 기본 이미지 사용: %s", e)
            return self.default_path

        if not path.is_file():
            logger.debug("이미지 없음, 기본 이미지 사용: %s", path)
            return self.default_path
        return path


# 이미지 저장소 의존성
def get_image_store() -> ImageStore:
    return ImageStore(settings.IMAGE_DIR, settings.IMAGE_EXTENSION, settings.DEFAULT_IMAGE)
