# models_bootstrap.py
from restaurant import models as _restaurant_models
from employee import models as _employee_models
from preference import models as _preference_models
from availability import models as _availability_models
from businesshours import models as _businesshours_models
from staffing import models as _staffing_models
from timeoff import models as _timeoff_models
from scheduling import models as _scheduling_models
from shift import models as _shift_models
