# Log event names
INVALID_LIMIT = 'INVALID_LIMIT'
LIST_SUCCESS = 'LIST_SUCCESS'
