DEBUG = False
TESTING = True
LOG_LEVEL = "INFO"

# Fixed so test results do not depend on the environment
OFFICE_SHIFT_NAME = "Office"
OFFICE_START_TIME = "09:00"
OFFICE_END_TIME = "20:00"
WORKING_HOURS_PER_DAY = 11
DAYS_PER_MONTH = 30
