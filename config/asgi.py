import os
from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# WhiteNoise middleware handles static files
application = get_asgi_application()
