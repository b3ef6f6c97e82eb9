import os

from tagcodec.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['TAGCODEC_CONFIG_YAML'] = os.environ.get('TAGCODEC_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
