"""Log Ingest - Constants and field layout"""

VERSION = "1.0.0"

SEPARATOR = ' '
COMMENT_MARKER = '#'

# Default locations, relative to the base directory
INPUT_DIR = 'RawLogsInput'
INPUT_FILE = 'access.log'
OUTPUT_DIR = 'IngestedLogResults'
OUTPUT_FILE = 'report.csv'

CSV_HEADER = ('Count', 'Ip-Address')

TIMESTAMP_FORMATS = (
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d %H:%M:%S.%f',
    '%Y-%m-%dT%H:%M:%S',
)

# W3C extended log layout: (index, attribute, type)
# 'timestamp' consumes fields 0 and 1.
FIELD_LAYOUT = (
    (0, 'timestamp', 'datetime'),
    (2, 'client_ip', 'str'),
    (3, 'username', 'str'),
    (4, 'site_name', 'str'),
    (5, 'computer_name', 'str'),
    (6, 'server_ip', 'str'),
    (7, 'port', 'int'),
    (8, 'method', 'str'),
    (9, 'uri_stem', 'str'),
    (10, 'uri_query', 'str'),
    (11, 'status', 'status'),
    (12, 'win32_status', 'int'),
    (13, 'bytes_sent', 'uint'),
    (14, 'time_taken', 'uint'),
    (15, 'version', 'str'),
    (16, 'host', 'str'),
    (17, 'user_agent', 'str'),
    (18, 'cookie', 'str'),
    (19, 'referrer', 'str'),
)

MIN_FIELDS = 20

INT32_RANGE = (-2 ** 31, 2 ** 31 - 1)
UINT32_RANGE = (0, 2 ** 32 - 1)
UINT64_RANGE = (0, 2 ** 64 - 1)

OCTET_WIDTH = 3

# Known HTTP status codes
HTTP_STATUS_CODES = {
    100: 'Continue',
    101: 'Switching Protocols',
    102: 'Processing',
    103: 'Early Hints',
    200: 'OK',
    201: 'Created',
    202: 'Accepted',
    203: 'Non-Authoritative Information',
    204: 'No Content',
    205: 'Reset Content',
    206: 'Partial Content',
    207: 'Multi-Status',
    208: 'Already Reported',
    226: 'IM Used',
    300: 'Multiple Choices',
    301: 'Moved Permanently',
    302: 'Found',
    303: 'See Other',
    304: 'Not Modified',
    305: 'Use Proxy',
    306: 'Unused',
    307: 'Temporary Redirect',
    308: 'Permanent Redirect',
    400: 'Bad Request',
    401: 'Unauthorized',
    402: 'Payment Required',
    403: 'Forbidden',
    404: 'Not Found',
    405: 'Method Not Allowed',
    406: 'Not Acceptable',
    407: 'Proxy Authentication Required',
    408: 'Request Timeout',
    409: 'Conflict',
    410: 'Gone',
    411: 'Length Required',
    412: 'Precondition Failed',
    413: 'Request Entity Too Large',
    414: 'Request-URI Too Long',
    415: 'Unsupported Media Type',
    416: 'Requested Range Not Satisfiable',
    417: 'Expectation Failed',
    421: 'Misdirected Request',
    422: 'Unprocessable Entity',
    423: 'Locked',
    424: 'Failed Dependency',
    426: 'Upgrade Required',
    428: 'Precondition Required',
    429: 'Too Many Requests',
    431: 'Request Header Fields Too Large',
    451: 'Unavailable For Legal Reasons',
    500: 'Internal Server Error',
    501: 'Not Implemented',
    502: 'Bad Gateway',
    503: 'Service Unavailable',
    504: 'Gateway Timeout',
    505: 'HTTP Version Not Supported',
    506: 'Variant Also Negotiates',
    507: 'Insufficient Storage',
    508: 'Loop Detected',
    510: 'Not Extended',
    511: 'Network Authentication Required',
}
