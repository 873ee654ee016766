# eventbus/constants.py
BASKET_CHECKOUT_QUEUE = "basketcheckout-queue"
