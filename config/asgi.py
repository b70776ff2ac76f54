# config/asgi.py

import os
from django.core.asgi import get_asgi_application

# Default settings
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')

application = get_asgi_application()
