from enum import Enum


class CharSet(Enum):
    """ code system understood by the printer: (parameter byte, python codec) """
    GB18030 = (0x00, "gb18030")
    BIG5 = (0x01, "big5")
    KSC5601 = (0x02, "euc_kr")
    UTF8 = (0xFF, "utf-8")

    @property
    def param(self) -> int:
        return self.value[0]

    @property
    def codec(self) -> str:
        return self.value[1]
