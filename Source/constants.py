STRUCTURED_ITEM_PATTERN = r'^([A-Za-z\-]+(?:\s+[A-Za-z\-]+)*)\s+\$?(\d+\.\d{2})$'
PRICE_TOKEN_PATTERN = r'\d+\.\d{2}'
PLAIN_NUMBER_PATTERN = r'^(?:\d+(?:\.\d*)?|\.\d+)$'

# Lines containing any of these are receipt boilerplate
IGNORE_KEYWORDS = [
    'total', 'subtotal', 'tax', 'discount', 'change', 'cash', 'card',
    'receipt', 'thank you', 'store', 'date', 'time',
]

CURRENCY_SYMBOLS = ['$', 'USD', '¢', '€', 'EUR', '£', 'лв', 'BGN']

RECEIPT_KEYWORDS = [
    'total', 'subtotal', 'tax', 'receipt', 'purchase', 'sale', 'store', 'shop', 'market',
    'price', 'cost', 'usd', 'amount', 'qty', 'quantity', 'item', 'product',
    'visa', 'mastercard', 'cash', 'card', 'payment', 'paid', 'change', 'tender',
    'walmart', 'target', 'costco', 'safeway', 'kroger', 'publix', 'whole foods',
    'starbucks', 'mcdonald', 'subway', 'pizza', 'restaurant', 'cafe', 'coffee',
]

CATEGORY_KEYWORDS = {
    'dairy': ['milk', 'cheese', 'yogurt', 'butter'],
    'meat': ['chicken', 'beef', 'pork', 'fish'],
    'fruit': ['apple', 'banana', 'orange', 'berry'],
    'vegetables': ['spinach', 'lettuce', 'tomato', 'carrot'],
    'grains': ['bread', 'pasta', 'rice', 'cereal'],
    'snacks': ['chips', 'cookie', 'candy', 'soda'],
}
DEFAULT_CATEGORY = 'other'

# Demo receipts behind decoded barcode/QR transaction ids
BARCODE_RECEIPTS = {
    'TXN12345': "Milk 3.50\nBread 2.00\nEggs 4.20\nApple 1.00\nTotal 10.70",
    'TXN67890': (
        "Organic Bananas 3.99\nWhole Milk 1 Gallon 4.29\nGreek Yogurt 5.49\n"
        "Chicken Breast 12.99\nBroccoli 2.99\nTotal 29.75"
    ),
    'TXN11111': (
        "Coffee Beans 12.99\nOrange Juice 3.79\nPasta 1.99\n"
        "Pasta Sauce 2.49\nParmesan Cheese 6.99\nTotal 28.25"
    ),
    'QR001': "Coffee 4.50\nMuffin 3.25\nOrange Juice 2.75\nTotal 10.50",
}
