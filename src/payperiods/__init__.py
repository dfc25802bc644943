"""payperiods — pay-period calculation engine for budgeting apps."""

__version__ = "0.1.0"

from payperiods.config.defaults import default_settings as default_settings
from payperiods.config.schema import PayPeriodConfig as PayPeriodConfig
from payperiods.config.schema import PayPeriodFrequency as PayPeriodFrequency
from payperiods.config.schema import PayPeriodSettings as PayPeriodSettings
from payperiods.core.aggregator import PayPeriod as PayPeriod
from payperiods.core.aggregator import PayPeriodCalculation as PayPeriodCalculation
from payperiods.core.aggregator import aggregate as aggregate
from payperiods.core.aggregator import find_period_containing as find_period_containing
from payperiods.core.aggregator import generate_periods as generate_periods
from payperiods.core.aggregator import total_income_for_month as total_income_for_month
from payperiods.core.aggregator import total_income_for_range as total_income_for_range
from payperiods.core.arithmetic import next_period_start as next_period_start
from payperiods.core.arithmetic import period_end_date as period_end_date
from payperiods.core.arithmetic import previous_period_start as previous_period_start
from payperiods.core.store import SettingsStore as SettingsStore
from payperiods.utils.exceptions import InvalidDateFormat as InvalidDateFormat
from payperiods.utils.exceptions import MalformedConfigJSON as MalformedConfigJSON
from payperiods.utils.exceptions import PayPeriodError as PayPeriodError
from payperiods.utils.exceptions import RangeTooLarge as RangeTooLarge
