from django.conf import settings
from django.http import HttpResponse
from django.shortcuts import render
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST
import logging

from reports import RESUME_REPORT_KEY
from .dto import ResumeSubmission
from .services.reporting import ReportService
from .services.reporting.fonts import load_display_font

# Configure logging
logger = logging.getLogger(__name__)

# Fields of the career history form, in display order
CAREER_FIELDS = [
    ('name', '氏名'),
    ('summary', '職務要約'),
    ('history', '職務経歴'),
    ('skills', '活かせる経験・知識・資格'),
    ('prText', '自己PR'),
]


@require_GET
def home(request):
    """Landing page."""
    return render(request, 'core/index.html')


@require_GET
def resume_form(request):
    """Résumé (履歴書) intake form."""
    return render(request, 'core/resume.html')


@require_GET
def career_form(request):
    """Career history (職務経歴書) intake form."""
    return render(request, 'core/career.html', {'fields': CAREER_FIELDS})


@csrf_exempt
@require_POST
def career_preview(request):
    """
    Echo the submitted career history back as an HTML preview.

    Known fields keep their form order and labels; any other submitted
    field follows, labelled by its name.
    """
    data = request.POST.dict()
    data.pop('csrfmiddlewaretoken', None)

    known = dict(CAREER_FIELDS)
    entries = [
        {'key': key, 'label': label, 'value': data.get(key, '')}
        for key, label in CAREER_FIELDS
    ]
    entries += [
        {'key': key, 'label': key, 'value': value}
        for key, value in data.items()
        if key not in known
    ]

    return render(request, 'core/career_preview.html', {'entries': entries})


@csrf_exempt
@require_POST
def generate_resume_pdf(request):
    """
    Render the submitted résumé fields to a PDF download.

    A missing or broken font file falls back to the built-in font; every
    other failure propagates as a server error.
    """
    submission = ResumeSubmission.from_post(request.POST)

    context = submission.to_report_context()
    context['today'] = timezone.localdate()
    context['font_name'] = load_display_font(settings.RESUME_FONT_PATH)
    context['document_title'] = f"履歴書 {submission.name}".strip()

    pdf_bytes = ReportService().render(RESUME_REPORT_KEY, context)

    filename = settings.RESUME_PDF_FILENAME
    response = HttpResponse(pdf_bytes, content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    response['Content-Length'] = len(pdf_bytes)

    logger.info(f"Served {filename} ({len(pdf_bytes)} bytes)")
    return response
