# src/wareki/core/era_data.py
from __future__ import annotations

"""
元号テーブル。

ERA_ROWS[code] = (key, name, first_year)
  - key:        ローマ字の識別子（同音は _1/_2 で区別）
  - name:       表示名。天皇名で代用している期間は（）で囲む
  - first_year: 元年の西暦年

code は 0（推古）から 255（令和）まで。南北朝期は 162..171 が南朝、172..188 が北朝。
"""

from typing import Tuple

ERA_ROWS: Tuple[Tuple[str, str, int], ...] = (
    ("SUIKO", "（推古）", 593),  # 0
    ("JOMEI", "（舒明）", 629),  # 1
    ("KOUGYOKU", "（皇極）", 642),  # 2
    ("TAIKA", "大化", 645),  # 3
    ("HAKUCHI", "白雉", 650),  # 4
    ("SAIMEI", "（斉明）", 655),  # 5
    ("TENJI_1", "（天智）", 662),  # 6
    ("TENMU", "（天武）", 672),  # 7
    ("SHUCHOU", "朱鳥", 686),  # 8
    ("JITOU", "（持統）", 687),  # 9
    ("MONMU", "（文武）", 697),  # 10
    ("TAIHOU", "大宝", 701),  # 11
    ("KEIUN", "慶雲", 704),  # 12
    ("WADOU", "和銅", 708),  # 13
    ("REIKI", "霊亀", 715),  # 14
    ("YOUROU", "養老", 717),  # 15
    ("JINKI", "神亀", 724),  # 16
    ("TENPYOU", "天平", 729),  # 17
    ("TENPYOUKANPOU", "天平感宝", 749),  # 18
    ("TENPYOUSHOUHOU", "天平勝宝", 749),  # 19
    ("TENPYOUHOUJI", "天平宝字", 757),  # 20
    ("TENPYOUJINGO", "天平神護", 765),  # 21
    ("JINGOKEIUN", "神護景雲", 767),  # 22
    ("HOUKI", "宝亀", 770),  # 23
    ("TENOU", "天応", 781),  # 24
    ("ENRYAKU", "延暦", 782),  # 25
    ("DAIDOU", "大同", 806),  # 26
    ("KOUNIN", "弘仁", 810),  # 27
    ("TENCHOU", "天長", 824),  # 28
    ("JOUWA_1", "承和", 834),  # 29
    ("KASHOU_1", "嘉祥", 848),  # 30
    ("NINJU", "仁寿", 851),  # 31
    ("SAIKOU", "斉衡", 854),  # 32
    ("TENNAN", "天安", 857),  # 33
    ("JOUGAN", "貞観", 859),  # 34
    ("GANGYOU", "元慶", 877),  # 35
    ("NINNA", "仁和", 885),  # 36
    ("KANPYOU", "寛平", 889),  # 37
    ("SHOUTAI", "昌泰", 898),  # 38
    ("ENGI", "延喜", 901),  # 39
    ("ENCHOU", "延長", 923),  # 40
    ("JOUHEI", "承平", 931),  # 41
    ("TENGYOU", "天慶", 938),  # 42
    ("TANRYAKU", "天暦", 947),  # 43
    ("TENTOKU", "天徳", 957),  # 44
    ("OUWA", "応和", 961),  # 45
    ("KOUHOU", "康保", 964),  # 46
    ("ANNA", "安和", 968),  # 47
    ("TENROKU", "天禄", 970),  # 48
    ("TENEN", "天延", 973),  # 49
    ("JOUGEN_1", "貞元", 976),  # 50
    ("TENGEN", "天元", 978),  # 51
    ("EIKAN", "永観", 983),  # 52
    ("KANNA", "寛和", 985),  # 53
    ("EIEN", "永延", 987),  # 54
    ("EISO", "永祚", 989),  # 55
    ("SHOURYAKU", "正暦", 990),  # 56
    ("CHOUTOKU", "長徳", 995),  # 57
    ("CHOUHOU", "長保", 999),  # 58
    ("KANKOU", "寛弘", 1004),  # 59
    ("CHOUWA", "長和", 1012),  # 60
    ("KANNIN", "寛仁", 1017),  # 61
    ("JIAN", "治安", 1021),  # 62
    ("MANJU", "万寿", 1024),  # 63
    ("CHOUGEN", "長元", 1028),  # 64
    ("CHOURYAKU", "長暦", 1037),  # 65
    ("CHOUKYUU", "長久", 1040),  # 66
    ("KANTOKU", "寛徳", 1044),  # 67
    ("EISHOU_1", "永承", 1046),  # 68
    ("TENGI", "天喜", 1053),  # 69
    ("KOUHEI", "康平", 1058),  # 70
    ("JIRYAKU", "治暦", 1065),  # 71
    ("ENKYUU", "延久", 1069),  # 72
    ("JOUHOU", "承保", 1074),  # 73
    ("JOURYAKU", "承暦", 1077),  # 74
    ("EIHOU", "永保", 1081),  # 75
    ("OUTOKU", "応徳", 1084),  # 76
    ("KANJI", "寛治", 1087),  # 77
    ("KAHOU", "嘉保", 1094),  # 78
    ("EICHOU", "永長", 1096),  # 79
    ("JOUTOKU", "承徳", 1097),  # 80
    ("KOUWA_1", "康和", 1099),  # 81
    ("CHOUJI", "長治", 1104),  # 82
    ("KASHOU_2", "嘉承", 1106),  # 83
    ("TENNIN", "天仁", 1108),  # 84
    ("TENEI", "天永", 1110),  # 85
    ("EIKYUU", "永久", 1113),  # 86
    ("GENNEI", "元永", 1118),  # 87
    ("HOUAN", "保安", 1120),  # 88
    ("TENJI_2", "天治", 1124),  # 89
    ("DAIJI", "大治", 1126),  # 90
    ("TENSHOU_1", "天承", 1131),  # 91
    ("CHOUSHOU", "長承", 1132),  # 92
    ("HOUEN", "保延", 1135),  # 93
    ("EIJI", "永治", 1141),  # 94
    ("KOUJI_1", "康治", 1142),  # 95
    ("ENYOU", "天養", 1144),  # 96
    ("KYUUAN", "久安", 1145),  # 97
    ("NINPEI", "仁平", 1151),  # 98
    ("KYUUJU", "久寿", 1154),  # 99
    ("HOUGEN", "保元", 1156),  # 100
    ("HEIJI", "平治", 1159),  # 101
    ("EIRYAKU", "永暦", 1160),  # 102
    ("OUHOU", "応保", 1161),  # 103
    ("CHOUKAN", "長寛", 1163),  # 104
    ("EIMAN", "永万", 1165),  # 105
    ("NINAN", "仁安", 1166),  # 106
    ("KAOU", "嘉応", 1169),  # 107
    ("JOUAN", "承安", 1171),  # 108
    ("ANGEN", "安元", 1175),  # 109
    ("JISHOU", "治承", 1177),  # 110
    ("YOUWA", "養和", 1181),  # 111
    ("JUEI", "寿永", 1182),  # 112
    ("GENRYAKU", "元暦", 1184),  # 113
    ("BUNJI", "文治", 1185),  # 114
    ("KENKYUU", "建久", 1190),  # 115
    ("SHOUJI", "正治", 1199),  # 116
    ("KENNIN", "建仁", 1201),  # 117
    ("GENKYUU", "元久", 1204),  # 118
    ("GENEI", "建永", 1206),  # 119
    ("JOUGEN_2", "承元", 1207),  # 120
    ("KENRYAKU", "建暦", 1211),  # 121
    ("KENPOU", "建保", 1213),  # 122
    ("JOUKYUU", "承久", 1219),  # 123
    ("JOUOU_1", "貞応", 1222),  # 124
    ("GENNIN", "元仁", 1224),  # 125
    ("KAROKU", "嘉禄", 1225),  # 126
    ("ANTEI", "安貞", 1227),  # 127
    ("KANKI", "寛喜", 1229),  # 128
    ("JOUEI", "貞永", 1232),  # 129
    ("TENPUKU", "天福", 1233),  # 130
    ("BUNRYAKU", "文暦", 1234),  # 131
    ("KATEI", "嘉禎", 1235),  # 132
    ("RYAKUNIN", "暦仁", 1238),  # 133
    ("ENOU", "延応", 1239),  # 134
    ("NINJI", "仁治", 1240),  # 135
    ("KANGEN", "寛元", 1243),  # 136
    ("HOUJI", "宝治", 1247),  # 137
    ("KENCHOU", "建長", 1249),  # 138
    ("KOUGEN", "康元", 1256),  # 139
    ("SHOUKA", "正嘉", 1257),  # 140
    ("SHOUGEN", "正元", 1259),  # 141
    ("BUNOU", "文応", 1260),  # 142
    ("KOUCHOU", "弘長", 1261),  # 143
    ("BUNEI", "文永", 1264),  # 144
    ("KENJI", "建治", 1275),  # 145
    ("KOUAN_1", "弘安", 1278),  # 146
    ("SHOUOU", "正応", 1288),  # 147
    ("EININ", "永仁", 1293),  # 148
    ("SHOUAN", "正安", 1299),  # 149
    ("KENGEN", "乾元", 1302),  # 150
    ("KAGEN", "嘉元", 1303),  # 151
    ("TOKUJI", "徳治", 1306),  # 152
    ("ENGYOU", "延慶", 1308),  # 153
    ("OUCHOU", "応長", 1311),  # 154
    ("SHOUWA_1", "正和", 1312),  # 155
    ("BUNPOU", "文保", 1317),  # 156
    ("GENOU", "元応", 1319),  # 157
    ("GENKOU_1", "元亨", 1321),  # 158
    ("SHOUCHUU", "正中", 1324),  # 159
    ("KARYAKU", "嘉暦", 1326),  # 160
    ("GENTOKU", "元徳", 1329),  # 161
    ("GENKOU_2", "元弘", 1331),  # 162
    ("KENMU", "建武", 1334),  # 163
    ("ENGEN", "延元", 1336),  # 164
    ("KOUKOKU", "興国", 1340),  # 165
    ("SHOUHEI", "正平", 1346),  # 166
    ("KENTOKU", "建徳", 1370),  # 167
    ("BUNCHUU", "文中", 1372),  # 168
    ("TENJU", "天授", 1375),  # 169
    ("KOUWA_2", "弘和", 1381),  # 170
    ("GENCHUU", "元中", 1384),  # 171
    ("SHOUKYOU", "正慶", 1332),  # 172
    ("RYAKUOU", "暦応", 1338),  # 173
    ("KOUEI", "康永", 1342),  # 174
    ("JOUWA_2", "貞和", 1345),  # 175
    ("KANOU", "観応", 1350),  # 176
    ("BUNNA", "文和", 1352),  # 177
    ("ENBUN", "延文", 1356),  # 178
    ("KOUAN_2", "康安", 1361),  # 179
    ("JOUJI", "貞治", 1362),  # 180
    ("OUAN", "応安", 1368),  # 181
    ("EIWA", "永和", 1375),  # 182
    ("KOURYAKU", "康暦", 1379),  # 183
    ("EITOKU", "永徳", 1381),  # 184
    ("SITOKU", "至徳", 1384),  # 185
    ("KAKEI", "嘉慶", 1387),  # 186
    ("KOUOU", "康応", 1389),  # 187
    ("MEITOKU", "明徳", 1390),  # 188
    ("OUEI", "応永", 1394),  # 189
    ("SHOUCHOU", "正長", 1428),  # 190
    ("EIKYOU", "永享", 1429),  # 191
    ("KAKITSU", "嘉吉", 1441),  # 192
    ("BUNAN", "文安", 1444),  # 193
    ("HOUTOKU", "宝徳", 1449),  # 194
    ("KYOUTOKU", "享徳", 1452),  # 195
    ("KOUSHOU", "康正", 1455),  # 196
    ("CHOUROKU", "長禄", 1457),  # 197
    ("KANSHOU", "寛正", 1460),  # 198
    ("BUNSHOU", "文正", 1466),  # 199
    ("OUNIN", "応仁", 1467),  # 200
    ("BUNMEI", "文明", 1469),  # 201
    ("CHOUKYOU", "長享", 1487),  # 202
    ("ENTOKU", "延徳", 1489),  # 203
    ("MEIOU", "明応", 1492),  # 204
    ("BUNKI", "文亀", 1501),  # 205
    ("EISHOU_2", "永正", 1504),  # 206
    ("DAIEI", "大永", 1521),  # 207
    ("KYOUROKU", "享禄", 1528),  # 208
    ("TENBUN", "天文", 1532),  # 209
    ("KOUJI_2", "弘治", 1555),  # 210
    ("EIROKU", "永禄", 1558),  # 211
    ("GENKI", "元亀", 1570),  # 212
    ("TENSHOU_2", "天正", 1573),  # 213
    ("BUNROKU", "文禄", 1592),  # 214
    ("KEICHOU", "慶長", 1596),  # 215
    ("GENNA", "元和", 1615),  # 216
    ("KANEI", "寛永", 1624),  # 217
    ("SHOUHOU", "正保", 1644),  # 218
    ("KEIAN", "慶安", 1648),  # 219
    ("JOUOU_2", "承応", 1652),  # 220
    ("MEIREKI", "明暦", 1655),  # 221
    ("MANJI", "万治", 1658),  # 222
    ("KANBUN", "寛文", 1661),  # 223
    ("EIPOU", "延宝", 1673),  # 224
    ("TENNA", "天和", 1681),  # 225
    ("JOUKYOU", "貞享", 1684),  # 226
    ("GENROKU", "元禄", 1688),  # 227
    ("HOUEI", "宝永", 1704),  # 228
    ("SHOUTOKU", "正徳", 1711),  # 229
    ("KYOUHOU", "享保", 1716),  # 230
    ("GENBUN", "元文", 1736),  # 231
    ("KANPOU", "寛保", 1741),  # 232
    ("ENKYOU", "延享", 1744),  # 233
    ("KANEN", "寛延", 1748),  # 234
    ("HOUREKI", "宝暦", 1751),  # 235
    ("MEIWA", "明和", 1764),  # 236
    ("ANEI", "安永", 1772),  # 237
    ("TENMEI", "天明", 1781),  # 238
    ("KANSEI", "寛政", 1789),  # 239
    ("KYOUWA", "享和", 1801),  # 240
    ("BUNKA", "文化", 1804),  # 241
    ("BUNSEI", "文政", 1818),  # 242
    ("TENPOU", "天保", 1830),  # 243
    ("KOUKA", "弘化", 1844),  # 244
    ("KAEI", "嘉永", 1848),  # 245
    ("ANSEI", "安政", 1854),  # 246
    ("MANEN", "万延", 1860),  # 247
    ("BUNKYUU", "文久", 1861),  # 248
    ("GENJI", "元治", 1864),  # 249
    ("KEIOU", "慶応", 1865),  # 250
    ("MEIJI", "明治", 1868),  # 251
    ("TAISHOU", "大正", 1912),  # 252
    ("SHOUWA", "昭和", 1926),  # 253
    ("HEISEI", "平成", 1989),  # 254
    ("REIWA", "令和", 2019),  # 255
)
