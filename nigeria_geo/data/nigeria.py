"""
Raw Nigerian administrative dataset.

Six geopolitical zones, 36 states plus the Federal Capital Territory, and the
774 Local Government Areas. States are listed alphabetically; LGAs are grouped
by state in the same order and listed alphabetically within each state. The
order of ``LGAS_DATA`` is the canonical LGA order used by every query.

This module holds plain data only. ``nigeria_geo.dataset`` turns it into
records and ``nigeria_geo.index`` validates and indexes it.
"""

REGION_DESCRIPTIONS = {
    'North-Central': 'Middle Belt region including FCT Abuja',
    'North-East': 'Northeastern states bordering Chad and Cameroon',
    'North-West': 'Northwestern states with largest land area',
    'South-East': 'Predominantly Igbo-speaking southeastern states',
    'South-South': 'Oil-rich Niger Delta region',
    'South-West': 'Predominantly Yoruba-speaking southwestern states',
}

# (name, capital, code, region)
STATES_DATA = [
    ("Abia", "Umuahia", "AB", "South-East"),
    ("Adamawa", "Yola", "AD", "North-East"),
    ("Akwa Ibom", "Uyo", "AK", "South-South"),
    ("Anambra", "Awka", "AN", "South-East"),
    ("Bauchi", "Bauchi", "BA", "North-East"),
    ("Bayelsa", "Yenagoa", "BY", "South-South"),
    ("Benue", "Makurdi", "BN", "North-Central"),
    ("Borno", "Maiduguri", "BO", "North-East"),
    ("Cross River", "Calabar", "CR", "South-South"),
    ("Delta", "Asaba", "DE", "South-South"),
    ("Ebonyi", "Abakaliki", "EB", "South-East"),
    ("Edo", "Benin City", "ED", "South-South"),
    ("Ekiti", "Ado-Ekiti", "EK", "South-West"),
    ("Enugu", "Enugu", "EN", "South-East"),
    ("FCT", "Abuja", "FC", "North-Central"),
    ("Gombe", "Gombe", "GO", "North-East"),
    ("Imo", "Owerri", "IM", "South-East"),
    ("Jigawa", "Dutse", "JI", "North-West"),
    ("Kaduna", "Kaduna", "KD", "North-West"),
    ("Kano", "Kano", "KN", "North-West"),
    ("Katsina", "Katsina", "KT", "North-West"),
    ("Kebbi", "Birnin Kebbi", "KB", "North-West"),
    ("Kogi", "Lokoja", "KO", "North-Central"),
    ("Kwara", "Ilorin", "KW", "North-Central"),
    ("Lagos", "Ikeja", "LA", "South-West"),
    ("Nasarawa", "Lafia", "NA", "North-Central"),
    ("Niger", "Minna", "NI", "North-Central"),
    ("Ogun", "Abeokuta", "OG", "South-West"),
    ("Ondo", "Akure", "ON", "South-West"),
    ("Osun", "Osogbo", "OS", "South-West"),
    ("Oyo", "Ibadan", "OY", "South-West"),
    ("Plateau", "Jos", "PL", "North-Central"),
    ("Rivers", "Port Harcourt", "RI", "South-South"),
    ("Sokoto", "Sokoto", "SK", "North-West"),
    ("Taraba", "Jalingo", "TA", "North-East"),
    ("Yobe", "Damaturu", "YO", "North-East"),
    ("Zamfara", "Gusau", "ZA", "North-West"),
]

# state code -> LGA names
LGAS_DATA = {
    "AB": [
        "Aba North", "Aba South", "Arochukwu", "Bende", "Ikwuano",
        "Isiala Ngwa North", "Isiala Ngwa South", "Isuikwuato", "Obi Ngwa",
        "Ohafia", "Osisioma Ngwa", "Ugwunagbo", "Ukwa East", "Ukwa West",
        "Umuahia North", "Umuahia South", "Umu Nneochi",
    ],
    "AD": [
        "Demsa", "Fufore", "Ganye", "Gayuk", "Gombi", "Grie", "Hong",
        "Jada", "Lamurde", "Madagali", "Maiha", "Mayo-Belwa", "Michika",
        "Mubi North", "Mubi South", "Numan", "Shelleng", "Song", "Toungo",
        "Yola North", "Yola South",
    ],
    "AK": [
        "Abak", "Eastern Obolo", "Eket", "Esit Eket", "Essien Udim",
        "Etim Ekpo", "Etinan", "Ibeno", "Ibesikpo Asutan", "Ibiono Ibom",
        "Ika", "Ikono", "Ikot Abasi", "Ikot Ekpene", "Ini", "Itu", "Mbo",
        "Mkpat Enin", "Nsit Atai", "Nsit Ibom", "Nsit Ubium", "Obot Akara",
        "Okobo", "Onna", "Oron", "Oruk Anam", "Udung Uko", "Ukanafun",
        "Uruan", "Urue Offong/Oruko", "Uyo",
    ],
    "AN": [
        "Aguata", "Anambra East", "Anambra West", "Anaocha", "Awka North",
        "Awka South", "Ayamelum", "Dunukofia", "Ekwusigo", "Idemili North",
        "Idemili South", "Ihiala", "Njikoka", "Nnewi North", "Nnewi South",
        "Ogbaru", "Onitsha North", "Onitsha South", "Orumba North",
        "Orumba South", "Oyi",
    ],
    "BA": [
        "Alkaleri", "Bauchi", "Bogoro", "Damban", "Darazo", "Dass",
        "Gamawa", "Ganjuwa", "Giade", "Itas/Gadau", "Jama'are", "Katagum",
        "Kirfi", "Misau", "Ningi", "Shira", "Tafawa Balewa", "Toro",
        "Warji", "Zaki",
    ],
    "BY": [
        "Brass", "Ekeremor", "Kolokuma/Opokuma", "Nembe", "Ogbia",
        "Sagbama", "Southern Ijaw", "Yenagoa",
    ],
    "BN": [
        "Ado", "Agatu", "Apa", "Buruku", "Gboko", "Guma", "Gwer East",
        "Gwer West", "Katsina-Ala", "Konshisha", "Kwande", "Logo",
        "Makurdi", "Obi", "Ogbadibo", "Ohimini", "Oju", "Okpokwu",
        "Otukpo", "Tarka", "Ukum", "Ushongo", "Vandeikya",
    ],
    "BO": [
        "Abadam", "Askira/Uba", "Bama", "Bayo", "Biu", "Chibok", "Damboa",
        "Dikwa", "Gubio", "Guzamala", "Gwoza", "Hawul", "Jere", "Kaga",
        "Kala/Balge", "Konduga", "Kukawa", "Kwaya Kusar", "Mafa",
        "Magumeri", "Maiduguri", "Marte", "Mobbar", "Monguno", "Ngala",
        "Nganzai", "Shani",
    ],
    "CR": [
        "Abi", "Akamkpa", "Akpabuyo", "Bakassi", "Bekwarra", "Biase",
        "Boki", "Calabar Municipal", "Calabar South", "Etung", "Ikom",
        "Obanliku", "Obubra", "Obudu", "Odukpani", "Ogoja", "Yakurr",
        "Yala",
    ],
    "DE": [
        "Aniocha North", "Aniocha South", "Bomadi", "Burutu",
        "Ethiope East", "Ethiope West", "Ika North East", "Ika South",
        "Isoko North", "Isoko South", "Ndokwa East", "Ndokwa West", "Okpe",
        "Oshimili North", "Oshimili South", "Patani", "Sapele", "Udu",
        "Ughelli North", "Ughelli South", "Ukwuani", "Uvwie",
        "Warri North", "Warri South", "Warri South West",
    ],
    "EB": [
        "Abakaliki", "Afikpo North", "Afikpo South", "Ebonyi",
        "Ezza North", "Ezza South", "Ikwo", "Ishielu", "Ivo", "Izzi",
        "Ohaozara", "Ohaukwu", "Onicha",
    ],
    "ED": [
        "Akoko-Edo", "Egor", "Esan Central", "Esan North-East",
        "Esan South-East", "Esan West", "Etsako Central", "Etsako East",
        "Etsako West", "Igueben", "Ikpoba-Okha", "Oredo", "Orhionmwon",
        "Ovia North-East", "Ovia South-West", "Owan East", "Owan West",
        "Uhunmwonde",
    ],
    "EK": [
        "Ado-Ekiti", "Efon", "Ekiti East", "Ekiti South-West",
        "Ekiti West", "Emure", "Gbonyin", "Ido-Osi", "Ijero", "Ikere",
        "Ikole", "Ilejemeje", "Irepodun/Ifelodun", "Ise/Orun", "Moba",
        "Oye",
    ],
    "EN": [
        "Aninri", "Awgu", "Enugu East", "Enugu North", "Enugu South",
        "Ezeagu", "Igbo-Etiti", "Igbo-Eze North", "Igbo-Eze South",
        "Isi-Uzo", "Nkanu East", "Nkanu West", "Nsukka", "Oji River",
        "Udenu", "Udi", "Uzo-Uwani",
    ],
    "FC": [
        "Abaji", "Bwari", "Gwagwalada", "Kuje", "Kwali",
        "Municipal Area Council",
    ],
    "GO": [
        "Akko", "Balanga", "Billiri", "Dukku", "Funakaye", "Gombe",
        "Kaltungo", "Kwami", "Nafada", "Shongom", "Yamaltu/Deba",
    ],
    "IM": [
        "Aboh Mbaise", "Ahiazu Mbaise", "Ehime Mbano",
        "Ezinihitte Mbaise", "Ideato North", "Ideato South",
        "Ihitte/Uboma", "Ikeduru", "Isiala Mbano", "Isu", "Mbaitoli",
        "Ngor Okpala", "Njaba", "Nkwerre", "Nwangele", "Obowo", "Oguta",
        "Ohaji/Egbema", "Okigwe", "Onuimo", "Orlu", "Orsu", "Oru East",
        "Oru West", "Owerri Municipal", "Owerri North", "Owerri West",
    ],
    "JI": [
        "Auyo", "Babura", "Biriniwa", "Birnin Kudu", "Buji", "Dutse",
        "Gagarawa", "Garki", "Gumel", "Guri", "Gwaram", "Gwiwa",
        "Hadejia", "Jahun", "Kafin Hausa", "Kaugama", "Kazaure",
        "Kiri Kasama", "Kiyawa", "Maigatari", "Malam Madori", "Miga",
        "Ringim", "Roni", "Sule Tankarkar", "Taura", "Yankwashi",
    ],
    "KD": [
        "Birnin Gwari", "Chikun", "Giwa", "Igabi", "Ikara", "Jaba",
        "Jema'a", "Kachia", "Kaduna North", "Kaduna South", "Kagarko",
        "Kajuru", "Kaura", "Kauru", "Kubau", "Kudan", "Lere", "Makarfi",
        "Sabon Gari", "Sanga", "Soba", "Zangon Kataf", "Zaria",
    ],
    "KN": [
        "Ajingi", "Albasu", "Bagwai", "Bebeji", "Bichi", "Bunkure",
        "Dala", "Dambatta", "Dawakin Kudu", "Dawakin Tofa", "Doguwa",
        "Fagge", "Gabasawa", "Garko", "Garun Mallam", "Gaya", "Gezawa",
        "Gwale", "Gwarzo", "Kabo", "Kano Municipal", "Karaye", "Kibiya",
        "Kiru", "Kumbotso", "Kunchi", "Kura", "Madobi", "Makoda",
        "Minjibir", "Nasarawa", "Rano", "Rimin Gado", "Rogo", "Shanono",
        "Sumaila", "Takai", "Tarauni", "Tofa", "Tsanyawa", "Tudun Wada",
        "Ungogo", "Warawa", "Wudil",
    ],
    "KT": [
        "Bakori", "Batagarawa", "Batsari", "Baure", "Bindawa", "Charanchi",
        "Dandume", "Danja", "Dan Musa", "Daura", "Dutsi", "Dutsin-Ma",
        "Faskari", "Funtua", "Ingawa", "Jibia", "Kafur", "Kaita",
        "Kankara", "Kankia", "Katsina", "Kurfi", "Kusada", "Mai'Adua",
        "Malumfashi", "Mani", "Mashi", "Matazu", "Musawa", "Rimi",
        "Sabuwa", "Safana", "Sandamu", "Zango",
    ],
    "KB": [
        "Aleiro", "Arewa Dandi", "Argungu", "Augie", "Bagudo",
        "Birnin Kebbi", "Bunza", "Dandi", "Fakai", "Gwandu", "Jega",
        "Kalgo", "Koko/Besse", "Maiyama", "Ngaski", "Sakaba", "Shanga",
        "Suru", "Wasagu/Danko", "Yauri", "Zuru",
    ],
    "KO": [
        "Adavi", "Ajaokuta", "Ankpa", "Bassa", "Dekina", "Ibaji", "Idah",
        "Igalamela-Odolu", "Ijumu", "Kabba/Bunu", "Koton Karfe", "Lokoja",
        "Mopa-Muro", "Ofu", "Ogori/Magongo", "Okehi", "Okene",
        "Olamaboro", "Omala", "Yagba East", "Yagba West",
    ],
    "KW": [
        "Asa", "Baruten", "Edu", "Ekiti", "Ifelodun", "Ilorin East",
        "Ilorin South", "Ilorin West", "Irepodun", "Isin", "Kaiama",
        "Moro", "Offa", "Oke Ero", "Oyun", "Pategi",
    ],
    "LA": [
        "Agege", "Ajeromi-Ifelodun", "Alimosho", "Amuwo-Odofin", "Apapa",
        "Badagry", "Epe", "Eti-Osa", "Ibeju-Lekki", "Ifako-Ijaiye",
        "Ikeja", "Ikorodu", "Kosofe", "Lagos Island", "Lagos Mainland",
        "Mushin", "Ojo", "Oshodi-Isolo", "Shomolu", "Surulere",
    ],
    "NA": [
        "Akwanga", "Awe", "Doma", "Karu", "Keana", "Keffi", "Kokona",
        "Lafia", "Nasarawa", "Nasarawa Eggon", "Obi", "Toto", "Wamba",
    ],
    "NI": [
        "Agaie", "Agwara", "Bida", "Borgu", "Bosso", "Chanchaga",
        "Edati", "Gbako", "Gurara", "Katcha", "Kontagora", "Lapai",
        "Lavun", "Magama", "Mariga", "Mashegu", "Mokwa", "Munya",
        "Paikoro", "Rafi", "Rijau", "Shiroro", "Suleja", "Tafa",
        "Wushishi",
    ],
    "OG": [
        "Abeokuta North", "Abeokuta South", "Ado-Odo/Ota", "Egbado North",
        "Egbado South", "Ewekoro", "Ifo", "Ijebu East", "Ijebu North",
        "Ijebu North East", "Ijebu Ode", "Ikenne", "Imeko Afon", "Ipokia",
        "Obafemi Owode", "Odeda", "Odogbolu", "Ogun Waterside",
        "Remo North", "Sagamu",
    ],
    "ON": [
        "Akoko North-East", "Akoko North-West", "Akoko South-East",
        "Akoko South-West", "Akure North", "Akure South", "Ese Odo",
        "Idanre", "Ifedore", "Ilaje", "Ile Oluji/Okeigbo", "Irele",
        "Odigbo", "Okitipupa", "Ondo East", "Ondo West", "Ose", "Owo",
    ],
    "OS": [
        "Aiyedaade", "Aiyedire", "Atakunmosa East", "Atakunmosa West",
        "Boluwaduro", "Boripe", "Ede North", "Ede South", "Egbedore",
        "Ejigbo", "Ife Central", "Ife East", "Ife North", "Ife South",
        "Ifedayo", "Ifelodun", "Ila", "Ilesa East", "Ilesa West",
        "Irepodun", "Irewole", "Isokan", "Iwo", "Obokun", "Odo Otin",
        "Ola Oluwa", "Olorunda", "Oriade", "Orolu", "Osogbo",
    ],
    "OY": [
        "Afijio", "Akinyele", "Atiba", "Atisbo", "Egbeda", "Ibadan North",
        "Ibadan North-East", "Ibadan North-West", "Ibadan South-East",
        "Ibadan South-West", "Ibarapa Central", "Ibarapa East",
        "Ibarapa North", "Ido", "Irepo", "Iseyin", "Itesiwaju", "Iwajowa",
        "Kajola", "Lagelu", "Ogbomosho North", "Ogbomosho South",
        "Ogo Oluwa", "Olorunsogo", "Oluyole", "Ona Ara", "Orelope",
        "Ori Ire", "Oyo East", "Oyo West", "Saki East", "Saki West",
        "Surulere",
    ],
    "PL": [
        "Barkin Ladi", "Bassa", "Bokkos", "Jos East", "Jos North",
        "Jos South", "Kanam", "Kanke", "Langtang North", "Langtang South",
        "Mangu", "Mikang", "Pankshin", "Qua'an Pan", "Riyom", "Shendam",
        "Wase",
    ],
    "RI": [
        "Abua/Odual", "Ahoada East", "Ahoada West", "Akuku-Toru",
        "Andoni", "Asari-Toru", "Bonny", "Degema", "Eleme", "Emohua",
        "Etche", "Gokana", "Ikwerre", "Khana", "Obio/Akpor",
        "Ogba/Egbema/Ndoni", "Ogu/Bolo", "Okrika", "Omuma",
        "Opobo/Nkoro", "Oyigbo", "Port Harcourt", "Tai",
    ],
    "SK": [
        "Binji", "Bodinga", "Dange Shuni", "Gada", "Goronyo", "Gudu",
        "Gwadabawa", "Illela", "Isa", "Kebbe", "Kware", "Rabah",
        "Sabon Birni", "Shagari", "Silame", "Sokoto North", "Sokoto South",
        "Tambuwal", "Tangaza", "Tureta", "Wamako", "Wurno", "Yabo",
    ],
    "TA": [
        "Ardo Kola", "Bali", "Donga", "Gashaka", "Gassol", "Ibi",
        "Jalingo", "Karim Lamido", "Kurmi", "Lau", "Sardauna", "Takum",
        "Ussa", "Wukari", "Yorro", "Zing",
    ],
    "YO": [
        "Bade", "Bursari", "Damaturu", "Fika", "Fune", "Geidam", "Gujba",
        "Gulani", "Jakusko", "Karasuwa", "Machina", "Nangere", "Nguru",
        "Potiskum", "Tarmuwa", "Yunusari", "Yusufari",
    ],
    "ZA": [
        "Anka", "Bakura", "Birnin Magaji/Kiyaw", "Bukkuyum", "Bungudu",
        "Gummi", "Gusau", "Kaura Namoda", "Maradun", "Maru", "Shinkafi",
        "Talata Mafara", "Tsafe", "Zurmi",
    ],
}
