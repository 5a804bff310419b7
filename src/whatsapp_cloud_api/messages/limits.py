"""Limites e constantes para validação de mensagens WhatsApp/Meta."""

# Limites de tamanho por tipo (caracteres)
MAX_TEXT_LENGTH = 4096
MAX_CAPTION_LENGTH = 1024
MAX_FILENAME_LENGTH = 240
MAX_INTERACTIVE_BODY_LENGTH = 1024
MAX_HEADER_TEXT_LENGTH = 60
MAX_FOOTER_LENGTH = 60
MAX_BUTTON_TEXT_LENGTH = 20
MAX_BUTTON_ID_LENGTH = 256
MAX_BUTTONS_PER_MESSAGE = 3
MAX_LIST_SECTIONS = 10
MAX_LIST_ROWS = 10
MAX_LIST_SECTION_TITLE_LENGTH = 24
MAX_LIST_ROW_ID_LENGTH = 200
MAX_LIST_ROW_TITLE_LENGTH = 24
MAX_LIST_ROW_DESCRIPTION_LENGTH = 72
MAX_TEMPLATE_NAME_LENGTH = 512
MAX_TEMPLATE_BUTTON_INDEX = 9

# Coordenadas geográficas
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Formato de aniversário aceito em cartões de contato
BIRTHDAY_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
