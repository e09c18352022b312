"""accountaudit: audit trail for newly created IAM accounts.

Reacts to account-creation events delivered by EventBridge and logs one
line correlating the new account with its provisioning state: the contact
address kept in SSM Parameter Store and the run's shared temporary
password kept in Secrets Manager.
"""

__version__ = "0.1.0"
__description__ = "Correlate new-account events with provisioning state"

from accountaudit.core.correlator import EventCorrelator
from accountaudit.core.extractor import MalformedEventError
from accountaudit.handler import lambda_handler

__all__ = ["EventCorrelator", "MalformedEventError", "lambda_handler", "__version__"]
