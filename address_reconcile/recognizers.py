from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Tuple

from .base_data import build_reverse_alias_map, alias_key


class Directional(str, Enum):
    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"
    NORTHEAST = "NORTHEAST"
    NORTHWEST = "NORTHWEST"
    SOUTHEAST = "SOUTHEAST"
    SOUTHWEST = "SOUTHWEST"

    def abbreviate(self) -> str:
        return _DIRECTIONALS[self][0]


class PostType(str, Enum):
    """USPS Publication 28 Appendix C1 street suffixes, plus the compound DRIVE CUTOFF."""
    ALLEY = "ALLEY"
    ANEX = "ANEX"
    ARCADE = "ARCADE"
    AVENUE = "AVENUE"
    BAYOU = "BAYOU"
    BEACH = "BEACH"
    BEND = "BEND"
    BLUFF = "BLUFF"
    BLUFFS = "BLUFFS"
    BOTTOM = "BOTTOM"
    BOULEVARD = "BOULEVARD"
    BRANCH = "BRANCH"
    BRIDGE = "BRIDGE"
    BROOK = "BROOK"
    BROOKS = "BROOKS"
    BURG = "BURG"
    BURGS = "BURGS"
    BYPASS = "BYPASS"
    CAMP = "CAMP"
    CANYON = "CANYON"
    CAPE = "CAPE"
    CAUSEWAY = "CAUSEWAY"
    CENTER = "CENTER"
    CENTERS = "CENTERS"
    CIRCLE = "CIRCLE"
    CIRCLES = "CIRCLES"
    CLIFF = "CLIFF"
    CLIFFS = "CLIFFS"
    CLUB = "CLUB"
    COMMON = "COMMON"
    COMMONS = "COMMONS"
    CORNER = "CORNER"
    CORNERS = "CORNERS"
    COURSE = "COURSE"
    COURT = "COURT"
    COURTS = "COURTS"
    COVE = "COVE"
    COVES = "COVES"
    CREEK = "CREEK"
    CRESCENT = "CRESCENT"
    CREST = "CREST"
    CROSSING = "CROSSING"
    CROSSROAD = "CROSSROAD"
    CROSSROADS = "CROSSROADS"
    CURVE = "CURVE"
    CUTOFF = "CUTOFF"
    DALE = "DALE"
    DAM = "DAM"
    DIVIDE = "DIVIDE"
    DRIVE = "DRIVE"
    DRIVE_CUTOFF = "DRIVE CUTOFF"
    DRIVES = "DRIVES"
    ESTATE = "ESTATE"
    ESTATES = "ESTATES"
    EXPRESSWAY = "EXPRESSWAY"
    EXTENSION = "EXTENSION"
    EXTENSIONS = "EXTENSIONS"
    FALL = "FALL"
    FALLS = "FALLS"
    FERRY = "FERRY"
    FIELD = "FIELD"
    FIELDS = "FIELDS"
    FLAT = "FLAT"
    FLATS = "FLATS"
    FORD = "FORD"
    FORDS = "FORDS"
    FOREST = "FOREST"
    FORGE = "FORGE"
    FORGES = "FORGES"
    FORK = "FORK"
    FORKS = "FORKS"
    FORT = "FORT"
    FREEWAY = "FREEWAY"
    GARDEN = "GARDEN"
    GARDENS = "GARDENS"
    GATEWAY = "GATEWAY"
    GLEN = "GLEN"
    GLENS = "GLENS"
    GREEN = "GREEN"
    GREENS = "GREENS"
    GROVE = "GROVE"
    GROVES = "GROVES"
    HARBOR = "HARBOR"
    HARBORS = "HARBORS"
    HAVEN = "HAVEN"
    HEIGHTS = "HEIGHTS"
    HIGHWAY = "HIGHWAY"
    HILL = "HILL"
    HILLS = "HILLS"
    HOLLOW = "HOLLOW"
    INLET = "INLET"
    ISLAND = "ISLAND"
    ISLANDS = "ISLANDS"
    ISLE = "ISLE"
    JUNCTION = "JUNCTION"
    JUNCTIONS = "JUNCTIONS"
    KEY = "KEY"
    KEYS = "KEYS"
    KNOLL = "KNOLL"
    KNOLLS = "KNOLLS"
    LAKE = "LAKE"
    LAKES = "LAKES"
    LAND = "LAND"
    LANDING = "LANDING"
    LANE = "LANE"
    LIGHT = "LIGHT"
    LIGHTS = "LIGHTS"
    LOAF = "LOAF"
    LOCK = "LOCK"
    LOCKS = "LOCKS"
    LODGE = "LODGE"
    LOOP = "LOOP"
    MALL = "MALL"
    MANOR = "MANOR"
    MANORS = "MANORS"
    MEADOW = "MEADOW"
    MEADOWS = "MEADOWS"
    MEWS = "MEWS"
    MILL = "MILL"
    MILLS = "MILLS"
    MISSION = "MISSION"
    MOTORWAY = "MOTORWAY"
    MOUNT = "MOUNT"
    MOUNTAIN = "MOUNTAIN"
    MOUNTAINS = "MOUNTAINS"
    NECK = "NECK"
    ORCHARD = "ORCHARD"
    OVAL = "OVAL"
    OVERPASS = "OVERPASS"
    PARK = "PARK"
    PARKWAY = "PARKWAY"
    PASS = "PASS"
    PASSAGE = "PASSAGE"
    PATH = "PATH"
    PIKE = "PIKE"
    PINE = "PINE"
    PINES = "PINES"
    PLACE = "PLACE"
    PLAIN = "PLAIN"
    PLAINS = "PLAINS"
    PLAZA = "PLAZA"
    POINT = "POINT"
    POINTS = "POINTS"
    PORT = "PORT"
    PORTS = "PORTS"
    PRAIRIE = "PRAIRIE"
    RADIAL = "RADIAL"
    RAMP = "RAMP"
    RANCH = "RANCH"
    RAPID = "RAPID"
    RAPIDS = "RAPIDS"
    REST = "REST"
    RIDGE = "RIDGE"
    RIDGES = "RIDGES"
    RIVER = "RIVER"
    ROAD = "ROAD"
    ROADS = "ROADS"
    ROUTE = "ROUTE"
    ROW = "ROW"
    RUE = "RUE"
    RUN = "RUN"
    SHOAL = "SHOAL"
    SHOALS = "SHOALS"
    SHORE = "SHORE"
    SHORES = "SHORES"
    SKYWAY = "SKYWAY"
    SPRING = "SPRING"
    SPRINGS = "SPRINGS"
    SPUR = "SPUR"
    SQUARE = "SQUARE"
    SQUARES = "SQUARES"
    STATION = "STATION"
    STRAVENUE = "STRAVENUE"
    STREAM = "STREAM"
    STREET = "STREET"
    STREETS = "STREETS"
    SUMMIT = "SUMMIT"
    TERRACE = "TERRACE"
    THROUGHWAY = "THROUGHWAY"
    TRACE = "TRACE"
    TRACK = "TRACK"
    TRAFFICWAY = "TRAFFICWAY"
    TRAIL = "TRAIL"
    TRAILER = "TRAILER"
    TUNNEL = "TUNNEL"
    TURNPIKE = "TURNPIKE"
    UNDERPASS = "UNDERPASS"
    UNION = "UNION"
    UNIONS = "UNIONS"
    VALLEY = "VALLEY"
    VALLEYS = "VALLEYS"
    VIADUCT = "VIADUCT"
    VIEW = "VIEW"
    VIEWS = "VIEWS"
    VILLAGE = "VILLAGE"
    VILLAGES = "VILLAGES"
    VILLE = "VILLE"
    VISTA = "VISTA"
    WALK = "WALK"
    WALL = "WALL"
    WAY = "WAY"
    WAYS = "WAYS"
    WELL = "WELL"
    WELLS = "WELLS"

    def abbreviate(self) -> str:
        return _POST_TYPES[self][0]


class SubaddressType(str, Enum):
    """USPS Publication 28 Appendix C2 secondary unit designators."""
    APARTMENT = "APARTMENT"
    BASEMENT = "BASEMENT"
    BUILDING = "BUILDING"
    DEPARTMENT = "DEPARTMENT"
    FLOOR = "FLOOR"
    FRONT = "FRONT"
    HANGAR = "HANGAR"
    KEY = "KEY"
    LOBBY = "LOBBY"
    LOT = "LOT"
    LOWER = "LOWER"
    OFFICE = "OFFICE"
    PENTHOUSE = "PENTHOUSE"
    PIER = "PIER"
    REAR = "REAR"
    ROOM = "ROOM"
    SIDE = "SIDE"
    SLIP = "SLIP"
    SPACE = "SPACE"
    STOP = "STOP"
    SUITE = "SUITE"
    TRAILER = "TRAILER"
    UNIT = "UNIT"
    UPPER = "UPPER"

    def abbreviate(self) -> str:
        return _SUBADDRESS_TYPES[self][0]


class AddressStatus(str, Enum):
    """Local status assigned by the addressing authority."""
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    POSTAL = "POSTAL"
    TEMPORARY = "TEMPORARY"
    RETIRED = "RETIRED"
    VIRTUAL = "VIRTUAL"
    OTHER = "OTHER"

    def abbreviate(self) -> str:
        return _STATUSES[self][0]


# 值的第一项是标准缩写，其余为已知的别名/错拼
_DIRECTIONALS: Dict[Directional, Tuple[str, ...]] = {
    Directional.NORTH: ("N",),
    Directional.SOUTH: ("S",),
    Directional.EAST: ("E",),
    Directional.WEST: ("W",),
    Directional.NORTHEAST: ("NE", "NORTH EAST"),
    Directional.NORTHWEST: ("NW", "NORTH WEST"),
    Directional.SOUTHEAST: ("SE", "SOUTH EAST"),
    Directional.SOUTHWEST: ("SW", "SOUTH WEST"),
}

_POST_TYPES: Dict[PostType, Tuple[str, ...]] = {
    PostType.ALLEY: ("ALY", "ALLEE", "ALLY"),
    PostType.ANEX: ("ANX", "ANNEX", "ANNX"),
    PostType.ARCADE: ("ARC",),
    PostType.AVENUE: ("AVE", "AV", "AVEN", "AVENU", "AVN", "AVNUE"),
    PostType.BAYOU: ("BYU", "BAYOO"),
    PostType.BEACH: ("BCH",),
    PostType.BEND: ("BND",),
    PostType.BLUFF: ("BLF", "BLUF"),
    PostType.BLUFFS: ("BLFS",),
    PostType.BOTTOM: ("BTM", "BOT", "BOTTM"),
    PostType.BOULEVARD: ("BLVD", "BOUL", "BOULV"),
    PostType.BRANCH: ("BR", "BRNCH"),
    PostType.BRIDGE: ("BRG", "BRDGE"),
    PostType.BROOK: ("BRK",),
    PostType.BROOKS: ("BRKS",),
    PostType.BURG: ("BG",),
    PostType.BURGS: ("BGS",),
    PostType.BYPASS: ("BYP", "BYPA", "BYPAS", "BYPS"),
    PostType.CAMP: ("CP", "CMP"),
    PostType.CANYON: ("CYN", "CANYN", "CNYN"),
    PostType.CAPE: ("CPE",),
    PostType.CAUSEWAY: ("CSWY", "CAUSWA"),
    PostType.CENTER: ("CTR", "CEN", "CENT", "CENTR", "CENTRE", "CNTER", "CNTR"),
    PostType.CENTERS: ("CTRS",),
    PostType.CIRCLE: ("CIR", "CIRC", "CIRCL", "CRCL", "CRCLE"),
    PostType.CIRCLES: ("CIRS",),
    PostType.CLIFF: ("CLF",),
    PostType.CLIFFS: ("CLFS",),
    PostType.CLUB: ("CLB",),
    PostType.COMMON: ("CMN",),
    PostType.COMMONS: ("CMNS",),
    PostType.CORNER: ("COR",),
    PostType.CORNERS: ("CORS",),
    PostType.COURSE: ("CRSE",),
    PostType.COURT: ("CT", "CRT"),
    PostType.COURTS: ("CTS",),
    PostType.COVE: ("CV",),
    PostType.COVES: ("CVS",),
    PostType.CREEK: ("CRK",),
    PostType.CRESCENT: ("CRES", "CRSENT", "CRSNT"),
    PostType.CREST: ("CRST",),
    PostType.CROSSING: ("XING", "CRSSNG"),
    PostType.CROSSROAD: ("XRD",),
    PostType.CROSSROADS: ("XRDS",),
    PostType.CURVE: ("CURV",),
    PostType.CUTOFF: ("CTOFF", "CUT OFF"),
    PostType.DALE: ("DL",),
    PostType.DAM: ("DM",),
    PostType.DIVIDE: ("DV", "DIV", "DVD"),
    PostType.DRIVE: ("DR", "DRIV", "DRV"),
    PostType.DRIVE_CUTOFF: ("DRCTOFF", "DR CUTOFF", "DR CTOFF", "DRIVE CTOFF"),
    PostType.DRIVES: ("DRS",),
    PostType.ESTATE: ("EST",),
    PostType.ESTATES: ("ESTS",),
    PostType.EXPRESSWAY: ("EXPY", "EXP", "EXPR", "EXPRESS", "EXPW"),
    PostType.EXTENSION: ("EXT", "EXTN", "EXTNSN"),
    PostType.EXTENSIONS: ("EXTS",),
    PostType.FALL: ("FALL",),
    PostType.FALLS: ("FLS",),
    PostType.FERRY: ("FRY", "FRRY"),
    PostType.FIELD: ("FLD",),
    PostType.FIELDS: ("FLDS",),
    PostType.FLAT: ("FLT",),
    PostType.FLATS: ("FLTS",),
    PostType.FORD: ("FRD",),
    PostType.FORDS: ("FRDS",),
    PostType.FOREST: ("FRST", "FORESTS"),
    PostType.FORGE: ("FRG", "FORG"),
    PostType.FORGES: ("FRGS",),
    PostType.FORK: ("FRK",),
    PostType.FORKS: ("FRKS",),
    PostType.FORT: ("FT", "FRT"),
    PostType.FREEWAY: ("FWY", "FREEWY", "FRWAY", "FRWY"),
    PostType.GARDEN: ("GDN", "GARDN", "GRDEN", "GRDN"),
    PostType.GARDENS: ("GDNS", "GRDNS"),
    PostType.GATEWAY: ("GTWY", "GATEWY", "GATWAY", "GTWAY"),
    PostType.GLEN: ("GLN",),
    PostType.GLENS: ("GLNS",),
    PostType.GREEN: ("GRN",),
    PostType.GREENS: ("GRNS",),
    PostType.GROVE: ("GRV", "GROV"),
    PostType.GROVES: ("GRVS",),
    PostType.HARBOR: ("HBR", "HARB", "HARBR", "HRBOR"),
    PostType.HARBORS: ("HBRS",),
    PostType.HAVEN: ("HVN",),
    PostType.HEIGHTS: ("HTS", "HT"),
    PostType.HIGHWAY: ("HWY", "HIGHWY", "HIWAY", "HIWY", "HWAY"),
    PostType.HILL: ("HL",),
    PostType.HILLS: ("HLS",),
    PostType.HOLLOW: ("HOLW", "HLLW", "HOLLOWS", "HOLWS"),
    PostType.INLET: ("INLT",),
    PostType.ISLAND: ("IS", "ISLND"),
    PostType.ISLANDS: ("ISS", "ISLNDS"),
    PostType.ISLE: ("ISLE", "ISLES"),
    PostType.JUNCTION: ("JCT", "JCTION", "JCTN", "JUNCTN", "JUNCTON"),
    PostType.JUNCTIONS: ("JCTS", "JCTNS"),
    PostType.KEY: ("KY",),
    PostType.KEYS: ("KYS",),
    PostType.KNOLL: ("KNL", "KNOL"),
    PostType.KNOLLS: ("KNLS",),
    PostType.LAKE: ("LK",),
    PostType.LAKES: ("LKS",),
    PostType.LAND: ("LAND",),
    PostType.LANDING: ("LNDG", "LNDNG"),
    PostType.LANE: ("LN",),
    PostType.LIGHT: ("LGT",),
    PostType.LIGHTS: ("LGTS",),
    PostType.LOAF: ("LF",),
    PostType.LOCK: ("LCK",),
    PostType.LOCKS: ("LCKS",),
    PostType.LODGE: ("LDG", "LDGE", "LODG"),
    PostType.LOOP: ("LOOP", "LOOPS"),
    PostType.MALL: ("MALL",),
    PostType.MANOR: ("MNR",),
    PostType.MANORS: ("MNRS",),
    PostType.MEADOW: ("MDW",),
    PostType.MEADOWS: ("MDWS", "MEDOWS"),
    PostType.MEWS: ("MEWS",),
    PostType.MILL: ("ML",),
    PostType.MILLS: ("MLS",),
    PostType.MISSION: ("MSN", "MISSN", "MSSN"),
    PostType.MOTORWAY: ("MTWY",),
    PostType.MOUNT: ("MT", "MNT"),
    PostType.MOUNTAIN: ("MTN", "MNTAIN", "MNTN", "MOUNTIN", "MTIN"),
    PostType.MOUNTAINS: ("MTNS", "MNTNS"),
    PostType.NECK: ("NCK",),
    PostType.ORCHARD: ("ORCH", "ORCHRD"),
    PostType.OVAL: ("OVAL", "OVL"),
    PostType.OVERPASS: ("OPAS",),
    PostType.PARK: ("PARK", "PRK", "PARKS"),
    PostType.PARKWAY: ("PKWY", "PARKWY", "PKWAY", "PKY", "PARKWAYS", "PKWYS"),
    PostType.PASS: ("PASS",),
    PostType.PASSAGE: ("PSGE",),
    PostType.PATH: ("PATH", "PATHS"),
    PostType.PIKE: ("PIKE", "PIKES"),
    PostType.PINE: ("PNE",),
    PostType.PINES: ("PNES",),
    PostType.PLACE: ("PL",),
    PostType.PLAIN: ("PLN",),
    PostType.PLAINS: ("PLNS",),
    PostType.PLAZA: ("PLZ", "PLZA"),
    PostType.POINT: ("PT",),
    PostType.POINTS: ("PTS",),
    PostType.PORT: ("PRT",),
    PostType.PORTS: ("PRTS",),
    PostType.PRAIRIE: ("PR", "PRR"),
    PostType.RADIAL: ("RADL", "RAD", "RADIEL"),
    PostType.RAMP: ("RAMP",),
    PostType.RANCH: ("RNCH", "RANCHES", "RNCHS"),
    PostType.RAPID: ("RPD",),
    PostType.RAPIDS: ("RPDS",),
    PostType.REST: ("RST",),
    PostType.RIDGE: ("RDG", "RDGE"),
    PostType.RIDGES: ("RDGS",),
    PostType.RIVER: ("RIV", "RVR", "RIVR"),
    PostType.ROAD: ("RD",),
    PostType.ROADS: ("RDS",),
    PostType.ROUTE: ("RTE",),
    PostType.ROW: ("ROW",),
    PostType.RUE: ("RUE",),
    PostType.RUN: ("RUN",),
    PostType.SHOAL: ("SHL",),
    PostType.SHOALS: ("SHLS",),
    PostType.SHORE: ("SHR", "SHOAR"),
    PostType.SHORES: ("SHRS", "SHOARS"),
    PostType.SKYWAY: ("SKWY",),
    PostType.SPRING: ("SPG", "SPNG", "SPRNG"),
    PostType.SPRINGS: ("SPGS", "SPNGS", "SPRNGS"),
    PostType.SPUR: ("SPUR", "SPURS"),
    PostType.SQUARE: ("SQ", "SQR", "SQRE", "SQU"),
    PostType.SQUARES: ("SQS", "SQRS"),
    PostType.STATION: ("STA", "STATN", "STN"),
    PostType.STRAVENUE: ("STRA", "STRAV", "STRAVEN", "STRAVN", "STRVN", "STRVNUE"),
    PostType.STREAM: ("STRM", "STREME"),
    PostType.STREET: ("ST", "STR", "STRT", "STREEET"),
    PostType.STREETS: ("STS",),
    PostType.SUMMIT: ("SMT", "SUMIT", "SUMITT"),
    PostType.TERRACE: ("TER", "TERR"),
    PostType.THROUGHWAY: ("TRWY",),
    PostType.TRACE: ("TRCE", "TRACES"),
    PostType.TRACK: ("TRAK", "TRACKS", "TRK", "TRKS"),
    PostType.TRAFFICWAY: ("TRFY",),
    PostType.TRAIL: ("TRL", "TRAILS", "TRLS"),
    PostType.TRAILER: ("TRLR", "TRLRS"),
    PostType.TUNNEL: ("TUNL", "TUNEL", "TUNLS", "TUNNELS", "TUNNL"),
    PostType.TURNPIKE: ("TPKE", "TRNPK", "TURNPK"),
    PostType.UNDERPASS: ("UPAS",),
    PostType.UNION: ("UN",),
    PostType.UNIONS: ("UNS",),
    PostType.VALLEY: ("VLY", "VALLY", "VLLY"),
    PostType.VALLEYS: ("VLYS",),
    PostType.VIADUCT: ("VIA", "VDCT", "VIADCT"),
    PostType.VIEW: ("VW",),
    PostType.VIEWS: ("VWS",),
    PostType.VILLAGE: ("VLG", "VILL", "VILLAG", "VILLG", "VILLIAGE"),
    PostType.VILLAGES: ("VLGS",),
    PostType.VILLE: ("VL",),
    PostType.VISTA: ("VIS", "VIST", "VST", "VSTA"),
    PostType.WALK: ("WALK", "WALKS"),
    PostType.WALL: ("WALL",),
    PostType.WAY: ("WAY", "WY"),
    PostType.WAYS: ("WAYS",),
    PostType.WELL: ("WL",),
    PostType.WELLS: ("WLS",),
}

_SUBADDRESS_TYPES: Dict[SubaddressType, Tuple[str, ...]] = {
    SubaddressType.APARTMENT: ("APT", "APPT", "APRT"),
    SubaddressType.BASEMENT: ("BSMT",),
    SubaddressType.BUILDING: ("BLDG", "BLD", "BLDNG"),
    SubaddressType.DEPARTMENT: ("DEPT",),
    SubaddressType.FLOOR: ("FL", "FLR"),
    SubaddressType.FRONT: ("FRNT",),
    SubaddressType.HANGAR: ("HNGR",),
    SubaddressType.KEY: ("KEY",),
    SubaddressType.LOBBY: ("LBBY",),
    SubaddressType.LOT: ("LOT",),
    SubaddressType.LOWER: ("LOWR",),
    SubaddressType.OFFICE: ("OFC",),
    SubaddressType.PENTHOUSE: ("PH",),
    SubaddressType.PIER: ("PIER",),
    SubaddressType.REAR: ("REAR",),
    SubaddressType.ROOM: ("RM",),
    SubaddressType.SIDE: ("SIDE",),
    SubaddressType.SLIP: ("SLIP",),
    SubaddressType.SPACE: ("SPC", "SP"),
    SubaddressType.STOP: ("STOP",),
    SubaddressType.SUITE: ("STE", "SUIT", "SUTE"),
    SubaddressType.TRAILER: ("TRLR",),
    SubaddressType.UNIT: ("UNIT", "UNT"),
    SubaddressType.UPPER: ("UPPR",),
}

_STATUSES: Dict[AddressStatus, Tuple[str, ...]] = {
    AddressStatus.ACTIVE: ("ACT", "CURRENT", "EXISTING"),
    AddressStatus.PENDING: ("PEND", "PROPOSED"),
    AddressStatus.POSTAL: ("POST",),
    AddressStatus.TEMPORARY: ("TEMP",),
    AddressStatus.RETIRED: ("RET", "INACTIVE"),
    AddressStatus.VIRTUAL: ("VIRT",),
    AddressStatus.OTHER: ("OTH",),
}

# 以 alias_key -> 枚举值 的常量表形式构建，模块加载时生成一次
_DIRECTIONAL_REV = build_reverse_alias_map({d: list(a) for d, a in _DIRECTIONALS.items()})
_POST_TYPE_REV = build_reverse_alias_map({p: list(a) for p, a in _POST_TYPES.items()})
_SUBADDRESS_TYPE_REV = build_reverse_alias_map({s: list(a) for s, a in _SUBADDRESS_TYPES.items()})
_STATUS_REV = build_reverse_alias_map({s: list(a) for s, a in _STATUSES.items()})


def recognize_directional(token: Optional[str]) -> Optional[Directional]:
    return _DIRECTIONAL_REV.get(alias_key(token))


def recognize_post_type(token: Optional[str]) -> Optional[PostType]:
    return _POST_TYPE_REV.get(alias_key(token))


def recognize_subaddress_type(token: Optional[str]) -> Optional[SubaddressType]:
    return _SUBADDRESS_TYPE_REV.get(alias_key(token))


def recognize_status(token: Optional[str]) -> Optional[AddressStatus]:
    return _STATUS_REV.get(alias_key(token))


def aliases_of(value: Enum) -> Tuple[str, ...]:
    """All spellings (canonical name first) that recognize to ``value``."""
    table = {
        Directional: _DIRECTIONALS,
        PostType: _POST_TYPES,
        SubaddressType: _SUBADDRESS_TYPES,
        AddressStatus: _STATUSES,
    }[type(value)]
    return (value.value,) + table[value]


# 复合后置类型：前后两个已识别的后置类型合并为一个值
COMPOUND_POST_TYPES: Dict[Tuple[PostType, PostType], PostType] = {
    (PostType.DRIVE, PostType.CUTOFF): PostType.DRIVE_CUTOFF,
}
