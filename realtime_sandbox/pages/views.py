from __future__ import annotations

import mimetypes

from django.conf import settings
from django.http import Http404
from django.http import HttpResponse
from django.views.decorators.http import require_safe


@require_safe
def index(request):
    path = settings.INDEX_HTML_PATH
    try:
        body = path.read_bytes()
    except FileNotFoundError as exc:
        msg = f"{path.name} is missing"
        raise Http404(msg) from exc
    content_type, _ = mimetypes.guess_type(path.name)
    return HttpResponse(body, content_type=content_type or "application/octet-stream")
