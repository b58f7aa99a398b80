import sys
import os

# Add your project directory to the sys.path
project_home = os.environ.get('COOKBOOK_HOME', os.path.dirname(os.path.abspath(__file__)))
if project_home not in sys.path:
    sys.path.insert(0, project_home)

# Set the working directory so the default recipes/ directory resolves
os.chdir(project_home)

from cookbook.app import create_app

application = create_app()
