# Field length bounds shared by the server's request models and the client's
# pre-submission checks.
MAX_CONTENT_LENGTH = 512
MAX_AUTHOR_LENGTH = 32
MAX_USERNAME_LENGTH = 32
MIN_USERNAME_LENGTH = 4
