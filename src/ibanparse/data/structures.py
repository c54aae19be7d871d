"""BBAN structures of the IBAN-issuing countries.

Source: SWIFT IBAN Registry. Each grammar is the 2-letter country code
followed by the BBAN format in registry notation: a length, an optional
``!`` for fixed length, and a character class (``n`` digits, ``a`` upper
case letters, ``c`` upper case alphanumerics, ``e`` space).

The check digits (``2!n``) are not part of the grammar.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CountryStructure:
    """Registry entry of one IBAN-issuing country.

    Attributes:
        code: ISO 3166-1 alpha-2 code (e.g., "DE")
        name: Country name in English
        length: Total IBAN length including country code and check digits
        grammar: Country code followed by the BBAN format
    """

    code: str
    name: str
    length: int
    grammar: str


IBAN_STRUCTURES: tuple[CountryStructure, ...] = (
    CountryStructure("AD", "Andorra", 24, "AD4!n4!n12!c"),
    CountryStructure("AE", "United Arab Emirates", 23, "AE3!n16!n"),
    CountryStructure("AL", "Albania", 28, "AL8!n16!c"),
    CountryStructure("AT", "Austria", 20, "AT5!n11!n"),
    CountryStructure("AZ", "Azerbaijan", 28, "AZ4!a20!c"),
    CountryStructure("BA", "Bosnia and Herzegovina", 20, "BA3!n3!n8!n2!n"),
    CountryStructure("BE", "Belgium", 16, "BE3!n7!n2!n"),
    CountryStructure("BG", "Bulgaria", 22, "BG4!a4!n2!n8!c"),
    CountryStructure("BH", "Bahrain", 22, "BH4!a14!c"),
    CountryStructure("BI", "Burundi", 27, "BI5!n5!n11!n2!n"),
    CountryStructure("BR", "Brazil", 29, "BR8!n5!n10!n1!a1!c"),
    CountryStructure("BY", "Belarus", 28, "BY4!c4!n16!c"),
    CountryStructure("CH", "Switzerland", 21, "CH5!n12!c"),
    CountryStructure("CR", "Costa Rica", 22, "CR4!n14!n"),
    CountryStructure("CY", "Cyprus", 28, "CY3!n5!n16!c"),
    CountryStructure("CZ", "Czechia", 24, "CZ4!n6!n10!n"),
    CountryStructure("DE", "Germany", 22, "DE8!n10!n"),
    CountryStructure("DJ", "Djibouti", 27, "DJ5!n5!n11!n2!n"),
    CountryStructure("DK", "Denmark", 18, "DK4!n9!n1!n"),
    CountryStructure("DO", "Dominican Republic", 28, "DO4!c20!n"),
    CountryStructure("EE", "Estonia", 20, "EE2!n14!n"),
    CountryStructure("EG", "Egypt", 29, "EG4!n4!n17!n"),
    CountryStructure("ES", "Spain", 24, "ES4!n4!n1!n1!n10!n"),
    CountryStructure("FI", "Finland", 18, "FI3!n11!n"),
    CountryStructure("FK", "Falkland Islands", 18, "FK2!a12!n"),
    CountryStructure("FO", "Faroe Islands", 18, "FO4!n9!n1!n"),
    CountryStructure("FR", "France", 27, "FR5!n5!n11!c2!n"),
    CountryStructure("GB", "United Kingdom", 22, "GB4!a6!n8!n"),
    CountryStructure("GE", "Georgia", 22, "GE2!a16!n"),
    CountryStructure("GI", "Gibraltar", 23, "GI4!a15!c"),
    CountryStructure("GL", "Greenland", 18, "GL4!n9!n1!n"),
    CountryStructure("GR", "Greece", 27, "GR3!n4!n16!c"),
    CountryStructure("GT", "Guatemala", 28, "GT4!c20!c"),
    CountryStructure("HR", "Croatia", 21, "HR7!n10!n"),
    CountryStructure("HU", "Hungary", 28, "HU3!n4!n1!n15!n1!n"),
    CountryStructure("IE", "Ireland", 22, "IE4!a6!n8!n"),
    CountryStructure("IL", "Israel", 23, "IL3!n3!n13!n"),
    CountryStructure("IQ", "Iraq", 23, "IQ4!a3!n12!n"),
    CountryStructure("IS", "Iceland", 26, "IS4!n2!n6!n10!n"),
    CountryStructure("IT", "Italy", 27, "IT1!a5!n5!n12!c"),
    CountryStructure("JO", "Jordan", 30, "JO4!a4!n18!c"),
    CountryStructure("KW", "Kuwait", 30, "KW4!a22!c"),
    CountryStructure("KZ", "Kazakhstan", 20, "KZ3!n13!c"),
    CountryStructure("LB", "Lebanon", 28, "LB4!n20!c"),
    CountryStructure("LC", "Saint Lucia", 32, "LC4!a24!c"),
    CountryStructure("LI", "Liechtenstein", 21, "LI5!n12!c"),
    CountryStructure("LT", "Lithuania", 20, "LT5!n11!n"),
    CountryStructure("LU", "Luxembourg", 20, "LU3!n13!c"),
    CountryStructure("LV", "Latvia", 21, "LV4!a13!c"),
    CountryStructure("LY", "Libya", 25, "LY3!n3!n15!n"),
    CountryStructure("MC", "Monaco", 27, "MC5!n5!n11!c2!n"),
    CountryStructure("MD", "Moldova", 24, "MD2!c18!c"),
    CountryStructure("ME", "Montenegro", 22, "ME3!n13!n2!n"),
    CountryStructure("MK", "North Macedonia", 19, "MK3!n10!c2!n"),
    CountryStructure("MN", "Mongolia", 20, "MN4!n12!n"),
    CountryStructure("MR", "Mauritania", 27, "MR5!n5!n11!n2!n"),
    CountryStructure("MT", "Malta", 31, "MT4!a5!n18!c"),
    CountryStructure("MU", "Mauritius", 30, "MU4!a2!n2!n12!n3!n3!a"),
    CountryStructure("NI", "Nicaragua", 28, "NI4!a20!n"),
    CountryStructure("NL", "Netherlands", 18, "NL4!a10!n"),
    CountryStructure("NO", "Norway", 15, "NO4!n6!n1!n"),
    CountryStructure("OM", "Oman", 23, "OM3!n16!c"),
    CountryStructure("PK", "Pakistan", 24, "PK4!a16!c"),
    CountryStructure("PL", "Poland", 28, "PL8!n16!n"),
    CountryStructure("PS", "Palestine", 29, "PS4!a21!c"),
    CountryStructure("PT", "Portugal", 25, "PT4!n4!n11!n2!n"),
    CountryStructure("QA", "Qatar", 29, "QA4!a21!c"),
    CountryStructure("RO", "Romania", 24, "RO4!a16!c"),
    CountryStructure("RS", "Serbia", 22, "RS3!n13!n2!n"),
    CountryStructure("RU", "Russia", 33, "RU9!n5!n15!c"),
    CountryStructure("SA", "Saudi Arabia", 24, "SA2!n18!c"),
    CountryStructure("SC", "Seychelles", 31, "SC4!a2!n2!n16!n3!a"),
    CountryStructure("SD", "Sudan", 18, "SD2!n12!n"),
    CountryStructure("SE", "Sweden", 24, "SE3!n16!n1!n"),
    CountryStructure("SI", "Slovenia", 19, "SI5!n8!n2!n"),
    CountryStructure("SK", "Slovakia", 24, "SK4!n6!n10!n"),
    CountryStructure("SM", "San Marino", 27, "SM1!a5!n5!n12!c"),
    CountryStructure("SO", "Somalia", 23, "SO4!n3!n12!n"),
    CountryStructure("ST", "Sao Tome and Principe", 25, "ST4!n4!n11!n2!n"),
    CountryStructure("SV", "El Salvador", 28, "SV4!a20!n"),
    CountryStructure("TL", "Timor-Leste", 23, "TL3!n14!n2!n"),
    CountryStructure("TN", "Tunisia", 24, "TN2!n3!n13!n2!n"),
    CountryStructure("TR", "Turkey", 26, "TR5!n1!n16!c"),
    CountryStructure("UA", "Ukraine", 29, "UA6!n19!c"),
    CountryStructure("VA", "Vatican City", 22, "VA3!n15!n"),
    CountryStructure("VG", "British Virgin Islands", 24, "VG4!a16!n"),
    CountryStructure("XK", "Kosovo", 20, "XK4!n10!n2!n"),
    CountryStructure("YE", "Yemen", 30, "YE4!a4!n18!c"),
)
