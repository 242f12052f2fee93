# Position query: upper bound for the single blocking read of the terminal's reply
READ_BUFFER_SIZE = 100

# Size reported when stdin/stdout are not attached to a terminal
FALLBACK_COLUMNS = 100
FALLBACK_ROWS = 50

OUTPUT_ENCODING = 'utf-8'

BLANK_CELL = ' '
