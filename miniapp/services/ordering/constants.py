"""Option sets, surcharges and alert texts for the product sheet."""

TEMPERATURES = ["Теплый", "Холодный"]

# First entry is the plain milk, which carries no surcharge
DEFAULT_MILK = "Обычное"
MILKS = [
    DEFAULT_MILK,
    "Безлактозное",
    "Овсяное",
    "Кокосовое",
    "Миндальное",
    "Банановое",
]

SYRUPS = [
    "Карамель",
    "Ваниль",
    "Лесной орех",
    "Кокос",
    "Солёная карамель",
    "Мята",
]

SUGAR_AMOUNTS = ["5г", "10г", "15г"]

JUICE_FLAVORS = ["Апельсиновый", "Вишневый"]

# Sizes above this volume (ml) are the large tier
LARGE_SIZE_THRESHOLD_ML = 300

MILK_SURCHARGE_SMALL = 70
MILK_SURCHARGE_LARGE = 90
SYRUP_SURCHARGE_SMALL = 30
SYRUP_SURCHARGE_LARGE = 50

# Alerts shown through the host
ALERT_CHOOSE_SIZE = "Выберите объем!"
ALERT_CHOOSE_TEMPERATURE = "Выберите температуру!"
ALERT_ADDRESS_REQUIRED = "Укажите этаж и офис!"
ALERT_CART_EMPTY = "Корзина пуста"
ALERT_ADMIN_ENABLED = "Режим администратора включен"
