import sys
import os

# Add your project directory to the sys.path
project_home = os.environ.get('PROJECT_HOME', os.path.dirname(os.path.abspath(__file__)))
if project_home not in sys.path:
    sys.path.insert(0, project_home)

os.environ.setdefault('FLASK_ENV', 'production')

# Import your Flask app
from app import create_app

application = create_app()
