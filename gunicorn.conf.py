import os
import sys

# Add src directory to Python path so 'barangay_case' package can be found
sys.path.append(os.path.join(os.getcwd(), 'src'))

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Report generation is pure and in-memory; a couple of threaded workers is plenty.
# Override via env vars if you scale up.
workers = int(os.environ.get('GUNICORN_WORKERS', '2'))
threads = int(os.environ.get('GUNICORN_THREADS', '2'))
worker_class = "gthread"
worker_tmp_dir = "/dev/shm"

# Citations are held per process, so keep preloading off.
preload_app = False
accesslog = "-"
errorlog = "-"
loglevel = "info"
timeout = 30
wsgi_app = "barangay_case.api.server:app"
