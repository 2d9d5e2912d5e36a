"""Constants used by the Wyze HomeKit accessories."""

# #### Wyze property ids ####
PROP_POWER = "P3"
PROP_BRIGHTNESS = "P1501"
PROP_COLOR_TEMP = "P1502"
PROP_COLOR = "P1507"

POWER_ON = "1"
POWER_OFF = "0"

# #### Value ranges ####
WYZE_COLOR_TEMP_MIN = 1800
WYZE_COLOR_TEMP_MAX = 6500
HOMEKIT_COLOR_TEMP_MIN = 153
HOMEKIT_COLOR_TEMP_MAX = 555

BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 100
SATURATION_MIN = 0
SATURATION_MAX = 100
HUE_MIN = 0
HUE_MAX = 360

# Value component used when pushing a HomeKit hue/saturation pair
COLOR_VALUE = 100

# #### Accessory types ####
TYPE_MESH_LIGHT = "MeshLight"

# #### Services ####
SERV_LIGHTBULB = "Lightbulb"

# #### Characteristics ####
CHAR_BRIGHTNESS = "Brightness"
CHAR_COLOR_TEMPERATURE = "ColorTemperature"
CHAR_HUE = "Hue"
CHAR_ON = "On"
CHAR_SATURATION = "Saturation"

# #### Properties ####
PROP_MAX_VALUE = "maxValue"
PROP_MIN_VALUE = "minValue"

# #### Write buffering ####
BUFFER_WINDOW = 0.5
