"""Static constants.

Reference data that doesn't change between runs: the US subnational prefix
and the literal sentinels used in records and reports.
"""

from bird_rarities.reference.geography import COUNTRY_US as COUNTRY_US
from bird_rarities.reference.geography import SUBNATIONAL_SEPARATOR as SUBNATIONAL_SEPARATOR
from bird_rarities.reference.geography import US_SUBNATIONAL_PREFIX as US_SUBNATIONAL_PREFIX
from bird_rarities.reference.sentinels import UNKNOWN as UNKNOWN
from bird_rarities.reference.sentinels import VALID_FLAG as VALID_FLAG
