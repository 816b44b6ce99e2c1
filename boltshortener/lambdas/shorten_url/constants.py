# Log event names
INVALID_BODY = 'INVALID_BODY'
INVALID_URL = 'INVALID_URL'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
