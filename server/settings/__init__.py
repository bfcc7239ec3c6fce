"""Main settings file for the file objects service.

Settings are split into components with django-split-settings,
every component reads its values through python-decouple.
"""

import django_stubs_ext
from split_settings.tools import include

# Makes generic Django classes such as ``ModelAdmin[FileObj]`` subscriptable
django_stubs_ext.monkeypatch()

include(
    'components/common.py',
    'components/logging.py',
    'components/storages.py',
    'components/file_objects.py',
)
