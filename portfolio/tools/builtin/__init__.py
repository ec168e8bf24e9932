"""Auto-import builtin category modules to trigger @register_category decorators."""
from . import password
from . import risk
from . import phishing
from . import leak
from . import headers
from . import certificate
from . import web_scan
from . import pentest
from . import port_scan
from . import capture
