import logging

logger = logging.getLogger(__name__)


from uniqlist.iterutils import *
from uniqlist.log import *
from uniqlist.options import *
from uniqlist.typingutils import *
from uniqlist.uniquelist import *
