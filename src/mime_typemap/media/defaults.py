"""Built-in type map and seeding of the shared registry.

``DEFAULT_TYPEMAP`` covers common web, text, image, audio, video,
archive and office extensions. It is written in the same type-map
syntax that external files use.
"""

import logging
from typing import Optional

from ..config.settings import Settings, get_settings
from ..exceptions import ConfigurationError
from .registry import MimeTypeRegistry, get_default_registry

logger = logging.getLogger(__name__)

DEFAULT_TYPEMAP = """\
# Built-in type map.
# Keyed and positional entries may be mixed.

type=application/octet-stream exts=bin,data,exe,dll,so
type=application/json exts=json
type=application/javascript exts=js,mjs
type=application/xml exts=xml,xsd
type=application/rdf+xml exts=rdf
type=application/rss+xml exts=rss
type=application/atom+xml exts=atom
type=application/xslt+xml exts=xsl,xslt
type=application/pdf exts=pdf
type=application/postscript exts=ps,eps,ai
type=application/rtf exts=rtf
type=application/wasm exts=wasm

text/plain txt text conf log
text/html htm html
text/css css
text/csv csv
text/markdown md markdown
text/cache-manifest appcache
text/sgml sgml sgm

# Archives
application/zip zip
application/gzip gz gzip
application/x-bzip2 bz2
application/x-xz xz
application/x-tar tar
application/x-7z-compressed 7z
application/x-rar-compressed rar
application/x-bittorrent torrent

# Images
image/png png
image/gif gif
image/jpeg jpeg jpg jpe
image/tiff tiff tif
image/webp webp
image/bmp bmp
image/svg+xml svg svgz
image/x-icon ico

# Audio
audio/mpeg mp3 mpga
audio/ogg ogg oga opus spx
audio/x-wav wav
audio/x-aiff aif aiff
audio/midi mid midi
audio/flac flac

# Video
video/mpeg mpeg mpg mpe
video/mp4 mp4 m4v
video/quicktime mov qt
video/webm webm
video/ogg ogv
video/x-msvideo avi

# Fonts
font/woff woff
font/woff2 woff2
font/ttf ttf
font/otf otf

# Office documents
application/msword doc
application/vnd.ms-excel xls
application/vnd.ms-powerpoint ppt
type=application/vnd.openxmlformats-officedocument.wordprocessingml.document \\
    exts=docx
type=application/vnd.openxmlformats-officedocument.spreadsheetml.sheet \\
    exts=xlsx
type=application/vnd.openxmlformats-officedocument.presentationml.presentation \\
    exts=pptx
application/vnd.oasis.opendocument.text odt
application/vnd.oasis.opendocument.spreadsheet ods
"""


async def load_default_registry(
    settings: Optional[Settings] = None,
) -> MimeTypeRegistry:
    """Seed the shared registry from the built-in map and configuration.

    Sources are applied in order: the built-in map (if enabled), each
    configured file, then the configured URL. Later sources override
    earlier ones for the same extension.

    :param settings: Settings to use (default: cached environment settings)
    :type settings: Optional[Settings]
    :return: The shared registry
    :rtype: MimeTypeRegistry
    :raises ConfigurationError: If ``strict`` is set and a source fails
    """
    settings = settings or get_settings()
    registry = get_default_registry()

    if settings.load_builtin_types:
        registry.parse(DEFAULT_TYPEMAP)

    sources = [str(p) for p in settings.typemap_paths]
    if settings.typemap_url:
        sources.append(settings.typemap_url)

    for source in sources:
        result = await registry.load(
            source, encoding=settings.encoding, timeout=settings.http_timeout
        )
        if not result.succeeded and settings.strict:
            raise ConfigurationError(
                f"Configured type map {source} failed to load: {result.error}",
                setting="typemap_url" if source == settings.typemap_url else "typemap_path",
            )
    return registry


__all__ = ["DEFAULT_TYPEMAP", "load_default_registry"]
