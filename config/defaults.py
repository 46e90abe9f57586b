"""Project defaults and parser constants."""

# Sentinel returned by id lookups and parse failures.
NOT_FOUND = -1

# Ids handed out to parsed command instances start here.
# Must stay above every built-in command id.
CMD_FIRST_WITH_ARG = 15000

TRUE_TOKENS = ("1", "true", "yes")
FALSE_TOKENS = ("0", "false", "no")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
