"""Media attachment entity model."""

from pydantic import BaseModel

from fediview.models.enums import FileType


class File(BaseModel):
    """Stored original file."""

    path: str = ""
    content_type: str = ""
    size: int = 0


class Thumbnail(BaseModel):
    """Stored preview image."""

    path: str = ""
    content_type: str = ""
    size: int = 0
    url: str = ""
    remote_url: str = ""


class Original(BaseModel):
    """Dimensions and playback details of the original file."""

    width: int = 0
    height: int = 0
    size: int = 0
    aspect: float = 0.0
    duration: float | None = None
    framerate: float | None = None
    bitrate: int | None = None


class Small(BaseModel):
    """Dimensions of the preview image."""

    width: int = 0
    height: int = 0
    size: int = 0
    aspect: float = 0.0


class Focus(BaseModel):
    x: float = 0.0
    y: float = 0.0


class FileMeta(BaseModel):
    original: Original = Original()
    small: Small = Small()
    focus: Focus = Focus()


class MediaAttachment(BaseModel):
    """Attachment owned by a status, or used as an account avatar/header."""

    id: str
    status_id: str = ""
    account_id: str = ""
    url: str = ""
    remote_url: str = ""
    type: FileType = FileType.UNKNOWN
    description: str = ""
    blurhash: str = ""
    file: File = File()
    thumbnail: Thumbnail = Thumbnail()
    file_meta: FileMeta = FileMeta()
