"""
Centralized constants for the Notice & MOM generator.
All fixed literals used across the codebase.
"""

# ===========================================
# INSTITUTION
# ===========================================
DEFAULT_DEPARTMENT = 'Department of Computer Science & Engineering'
HOD_SIGNATORY = 'HOD (CSE)'

# ===========================================
# DOCUMENT FORMATS
# ===========================================
RTF_MEDIA_TYPE = 'application/rtf'
TEXT_MEDIA_TYPE = 'text/plain'
RTF_EXTENSION = 'rtf'
TEXT_EXTENSION = 'txt'

SUPPORTED_FONT_SIZES = ('12', '13', '14')
DEFAULT_FONT_SIZE = '12'

# ===========================================
# ELABORATION
# ===========================================
ELABORATION_LENGTH_LIMIT = 100        # points longer than this are left untouched

# ===========================================
# AI TEXT SOURCE
# ===========================================
AI_MAX_TOKENS = 500
AI_TEMPERATURE = 0.7
AI_POINT_MAX_TOKENS = 150             # single-point elaboration
OPENAI_COST_PER_1K_TOKENS = 0.002     # gpt-3.5-turbo
TOKENS_PER_MOM = 200
TOKENS_PER_POINT = 50

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/meeting_docs.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
