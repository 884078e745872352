from hoikushi.settings import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Tests must never pick up a font file from the developer's machine
RESUME_FONT_PATH = BASE_DIR / 'fonts' / 'missing-for-tests.ttf'
IS_HOSTED = False
