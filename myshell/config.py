PROMPT_LABEL = "myshell"

# A single read takes at most MAX_LINE - 1 characters
MAX_LINE = 1024

# Reaper log, relative to the working directory at the time of the reap
LOG_FILE = "log.txt"
LOG_MESSAGE = b"Child process was terminated\n"

START_DIR = "/"
EXIT_FAILURE = 1
