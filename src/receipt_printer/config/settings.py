class Settings:
    class Printer:
        # "usb" or "network"
        TRANSPORT = "usb"
        VID = 0x28E9
        PID = 0x0289
        """ It is mandatory to put in_ep and out_ep"""
        IN_EP = 0x81
        OUT_EP = 0x01
        TIMEOUT = 1
        HOST = "192.168.100.50"
        PORT = 9100

    class Paper:
        PAPER_WIDTH_MM = 58
        PRINT_WIDTH_MM = 48
        DOTS_PER_LINE = 384

    class Font:
        MIN_SIZE = 1
        MAX_SIZE = 16
        DEFAULT_LINE_SPACING = 30

    class Batch:
        TRAILING_LINE_SPACING = 30
        TRAILING_FEED_LINES = 3
        SUCCESS_MESSAGE = "PRINT SUCCESS"
        EMPTY_MESSAGE = "Nothing to do"
        ERROR_MESSAGE = "Printer Error"
