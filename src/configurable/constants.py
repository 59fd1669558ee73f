APP_NAME = "configurable"
ENV_PREFIX = "CONFIGURABLE_"
DEFAULT_QUALIFIER = "com.github"
DEFAULT_ENV_FILE = ".env"
