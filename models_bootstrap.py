# models_bootstrap.py
from user import models as _user_models
from organization import models as _org_models
from employee import models as _employee_models
from leavetype import models as _leavetype_models
from availability import models as _availability_models
from leave import models as _leave_models
