"""Static geographic reference data.

Versioned lookup tables loaded wholesale at import and treated as read-only:
state names, county -> town tables for the New England states with county
data, flat city lists for the remaining supported states, and neighborhood
(sub-area) lists keyed by (state, town).

A few town names carry a hyphen ("Manchester-by-the-Sea"). A "Town-SubArea"
entry is a composite key only when the part before the hyphen is a town with
sub-areas.
"""

DATA_VERSION = "2025.11"

STATE_NAMES: dict[str, str] = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas",
    "CA": "California", "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware",
    "DC": "District of Columbia", "FL": "Florida", "GA": "Georgia", "HI": "Hawaii",
    "ID": "Idaho", "IL": "Illinois", "IN": "Indiana", "IA": "Iowa",
    "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine",
    "MD": "Maryland", "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota",
    "MS": "Mississippi", "MO": "Missouri", "MT": "Montana", "NE": "Nebraska",
    "NV": "Nevada", "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico",
    "NY": "New York", "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio",
    "OK": "Oklahoma", "OR": "Oregon", "PA": "Pennsylvania", "RI": "Rhode Island",
    "SC": "South Carolina", "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas",
    "UT": "Utah", "VT": "Vermont", "VA": "Virginia", "WA": "Washington",
    "WV": "West Virginia", "WI": "Wisconsin", "WY": "Wyoming",
}

# Massachusetts municipal lists by county
MA_COUNTY_TOWNS: dict[str, list[str]] = {
    "Barnstable": [
        "Barnstable", "Bourne", "Brewster", "Chatham", "Dennis", "Eastham", "Falmouth", "Harwich", "Mashpee", "Orleans", "Provincetown", "Sandwich", "Truro", "Wellfleet", "Yarmouth"
    ],
    "Berkshire": [
        "Adams", "Alford", "Becket", "Cheshire", "Clarksburg", "Dalton", "Egremont", "Florida", "Great Barrington", "Hancock", "Hinsdale", "Lanesborough", "Lee", "Lenox", "Monroe", "Monterey", "Mount Washington", "New Ashford", "New Marlborough", "North Adams", "Otis", "Peru", "Pittsfield", "Richmond", "Sandisfield", "Savoy", "Sheffield", "Stockbridge", "Tyringham", "Washington", "West Stockbridge", "Williamstown", "Windsor"
    ],
    "Bristol": [
        "Acushnet", "Attleboro", "Berkley", "Dartmouth", "Dighton", "Easton", "Fairhaven", "Fall River", "Freetown", "Mansfield", "New Bedford", "North Attleborough", "Norton", "Raynham", "Rehoboth", "Seekonk", "Somerset", "Swansea", "Taunton", "Westport"
    ],
    "Dukes": [
        "Gay Head", "Chilmark", "Edgartown", "Gosnold", "Oak Bluffs", "Tisbury", "West Tisbury"
    ],
    "Essex": [
        "Amesbury", "Andover", "Beverly", "Boxford", "Danvers", "Essex", "Georgetown", "Gloucester", "Groveland", "Hamilton", "Haverhill", "Ipswich", "Lawrence", "Lynn", "Lynnfield", "Manchester-by-the-Sea", "Marblehead", "Merrimac", "Methuen", "Middleton", "Nahant", "Newbury", "Newburyport", "North Andover", "Peabody", "Rockport", "Rowley", "Salem", "Salisbury", "Saugus", "Swampscott", "Topsfield", "Wenham"
    ],
    "Franklin": [
        "Ashfield", "Bernardston", "Buckland", "Charlemont", "Colrain", "Conway", "Deerfield", "Erving", "Gill", "Greenfield", "Hawley", "Heath", "Leverett", "Leyden", "Monroe", "Montague", "New Salem", "Northfield", "Orange", "Rowe", "Shelburne", "Shutesbury", "Sunderland", "Warwick", "Wendell", "Whately"
    ],
    "Hampden": [
        "Agawam", "Blandford", "Brimfield", "Chester", "Chicopee", "East Longmeadow", "Granville", "Hampden", "Holland", "Holyoke", "Longmeadow", "Ludlow", "Monson", "Montgomery", "Palmer", "Russell", "Southwick", "Springfield", "Tolland", "West Springfield", "Westfield", "Wilbraham"
    ],
    "Hampshire": [
        "Amherst", "Belchertown", "Chesterfield", "Cummington", "Easthampton", "Goshen", "Granby", "Hadley", "Hatfield", "Huntington", "Middlefield", "Northampton", "Pelham", "Plainfield", "South Hadley", "Southampton", "Ware", "Westhampton", "Williamsburg", "Worthington"
    ],
    "Middlesex": [
        "Acton", "Arlington", "Ashby", "Ashland", "Ayer", "Bedford", "Belmont", "Billerica", "Boxborough", "Burlington", "Cambridge", "Carlisle", "Chelmsford", "Concord", "Dracut", "Dunstable", "Everett", "Framingham", "Groton", "Holliston", "Hopkinton", "Hudson", "Lexington", "Lincoln", "Littleton", "Lowell", "Malden", "Marlborough", "Maynard", "Medford", "Melrose", "Natick", "Newton", "North Reading", "Pepperell", "Reading", "Sherborn", "Shirley", "Somerville", "Stoneham", "Stow", "Sudbury", "Tewksbury", "Townsend", "Tyngsborough", "Wakefield", "Waltham", "Watertown", "Wayland", "Westford", "Weston", "Wilmington", "Winchester", "Woburn"
    ],
    "Nantucket": ["Nantucket"],
    "Norfolk": [
        "Avon", "Bellingham", "Braintree", "Brookline", "Canton", "Cohasset", "Dedham", "Dover", "Foxborough", "Franklin", "Holbrook", "Medfield", "Medway", "Milton", "Needham", "Norfolk", "Norwood", "Plainville", "Quincy", "Randolph", "Sharon", "Stoughton", "Walpole", "Wellesley", "Westwood", "Weymouth", "Wrentham"
    ],
    "Plymouth": [
        "Abington", "Bridgewater", "Brockton", "Carver", "Duxbury", "East Bridgewater", "Halifax", "Hanover", "Hanson", "Hingham", "Hull", "Kingston", "Lakeville", "Marion", "Marshfield", "Mattapoisett", "Middleborough", "Norwell", "Pembroke", "Plymouth", "Plympton", "Rochester", "Rockland", "Scituate", "Wareham", "West Bridgewater", "Whitman"
    ],
    "Suffolk": ["Boston", "Charlestown", "Chelsea", "Revere", "Winthrop"],
    "Worcester": [
        "Ashburnham", "Ashby", "Athol", "Auburn", "Barre", "Berlin", "Blackstone", "Bolton", "Boylston", "Brookfield", "Charlton", "Clinton", "Douglas", "Dudley", "East Brookfield", "Fitchburg", "Gardner", "Grafton", "Hardwick", "Harvard", "Holden", "Hopedale", "Hubbardston", "Lancaster", "Leicester", "Leominster", "Lunenburg", "Mendon", "Milford", "Millbury", "Millville", "New Braintree", "Northborough", "Northbridge", "Oakham", "Oxford", "Paxton", "Petersham", "Phillipston", "Princeton", "Royalston", "Rutland", "Shrewsbury", "Southborough", "Southbridge", "Spencer", "Sterling", "Sturbridge", "Sutton", "Templeton", "Upton", "Uxbridge", "Warren", "Webster", "West Boylston", "West Brookfield", "Westborough", "Westminster", "Winchendon", "Worcester"
    ]
}

# Connecticut has 8 counties (planning regions)
CT_COUNTY_TOWNS: dict[str, list[str]] = {
    "Fairfield": [
        "Bethel", "Bridgeport", "Brookfield", "Danbury", "Darien", "Easton", "Fairfield", "Greenwich", "Monroe", "New Canaan", "New Fairfield", "Newtown", "Norwalk", "Redding", "Ridgefield", "Shelton", "Stamford", "Stratford", "Trumbull", "Weston", "Westport", "Wilton"
    ],
    "Hartford": [
        "Avon", "Berlin", "Bloomfield", "Bristol", "Burlington", "Canton", "East Granby", "East Hartford", "East Windsor", "Enfield", "Farmington", "Glastonbury", "Granby", "Hartford", "Hartland", "Manchester", "Marlborough", "New Britain", "Newington", "Plainville", "Rocky Hill", "Simsbury", "Somers", "South Windsor", "Southington", "Suffield", "West Hartford", "Wethersfield", "Windsor", "Windsor Locks"
    ],
    "Litchfield": [
        "Barkhamsted", "Bethlehem", "Bridgewater", "Canaan", "Colebrook", "Cornwall", "Goshen", "Harwinton", "Kent", "Litchfield", "Morris", "New Hartford", "New Milford", "Norfolk", "North Canaan", "Plymouth", "Roxbury", "Salisbury", "Sharon", "Thomaston", "Torrington", "Warren", "Washington", "Watertown", "Winchester", "Woodbury"
    ],
    "Middlesex": [
        "Chester", "Clinton", "Cromwell", "Deep River", "Durham", "East Haddam", "East Hampton", "Essex", "Haddam", "Killingworth", "Middlefield", "Middletown", "Old Saybrook", "Portland", "Westbrook"
    ],
    "New Haven": [
        "Ansonia", "Beacon Falls", "Bethany", "Branford", "Cheshire", "Derby", "East Haven", "Guilford", "Hamden", "Madison", "Meriden", "Middlebury", "Milford", "Naugatuck", "New Haven", "North Branford", "North Haven", "Orange", "Oxford", "Prospect", "Seymour", "Southbury", "Wallingford", "Waterbury", "Wolcott", "Woodbridge"
    ],
    "New London": [
        "Bozrah", "Colchester", "East Lyme", "Franklin", "Griswold", "Groton", "Lebanon", "Ledyard", "Lisbon", "Lyme", "Montville", "New London", "North Stonington", "Norwich", "Old Lyme", "Preston", "Salem", "Sprague", "Stonington", "Voluntown", "Waterford"
    ],
    "Tolland": [
        "Andover", "Bolton", "Columbia", "Coventry", "Ellington", "Hebron", "Mansfield", "Somers", "Stafford", "Tolland", "Union", "Vernon", "Willington"
    ],
    "Windham": [
        "Ashford", "Brooklyn", "Canterbury", "Chaplin", "Eastford", "Hampton", "Killingly", "Plainfield", "Pomfret", "Putnam", "Scotland", "Sterling", "Thompson", "Windham", "Woodstock"
    ]
}

RI_COUNTY_TOWNS: dict[str, list[str]] = {
    "Bristol": ["Barrington", "Bristol", "Warren"],
    "Kent": ["Coventry", "East Greenwich", "Warwick", "West Greenwich", "West Warwick"],
    "Newport": ["Jamestown", "Little Compton", "Middletown", "Newport", "Portsmouth", "Tiverton"],
    "Providence": [
        "Burrillville", "Central Falls", "Cranston", "Cumberland", "East Providence", "Foster", "Glocester", "Johnston", "Lincoln", "North Providence", "North Smithfield", "Pawtucket", "Providence", "Scituate", "Smithfield", "Woonsocket"
    ],
    "Washington": [
        "Charlestown", "Exeter", "Hopkinton", "Narragansett", "New Shoreham", "North Kingstown", "Richmond", "South Kingstown", "Westerly"
    ]
}

VT_COUNTY_TOWNS: dict[str, list[str]] = {
    "Addison": ["Addison", "Bridport", "Bristol", "Cornwall", "Ferrisburg", "Goshen", "Granville", "Hancock", "Leicester", "Lincoln", "Middlebury", "Monkton", "New Haven", "Orwell", "Panton", "Ripton", "Salisbury", "Shoreham", "Starksboro", "Vergennes", "Waltham", "Weybridge", "Whiting"],
    "Bennington": ["Arlington", "Bennington", "Dorset", "Glastenbury", "Landgrove", "Manchester", "Peru", "Pownal", "Readsboro", "Rupert", "Sandgate", "Searsburg", "Shaftsbury", "Stamford", "Sunderland", "Winhall", "Woodford"],
    "Caledonia": ["Barnet", "Burke", "Danville", "Groton", "Hardwick", "Kirby", "Lyndon", "Newark", "Peacham", "Ryegate", "Sheffield", "St. Johnsbury", "Stannard", "Sutton", "Walden", "Waterford", "Wheelock"],
    "Chittenden": ["Bolton", "Burlington", "Charlotte", "Colchester", "Essex", "Hinesburg", "Huntington", "Jericho", "Milton", "Richmond", "St. George", "Shelburne", "South Burlington", "Underhill", "Westford", "Williston", "Winooski"],
    "Essex": ["Averill", "Bloomfield", "Brighton", "Brunswick", "Canaan", "Concord", "East Haven", "Ferdinand", "Granby", "Guildhall", "Lemington", "Lewis", "Lunenburg", "Maidstone", "Norton", "Victory"],
    "Franklin": ["Bakersfield", "Berkshire", "Enosburg", "Fairfax", "Fairfield", "Fletcher", "Franklin", "Georgia", "Highgate", "Montgomery", "Richford", "St. Albans", "Sheldon", "Swanton"],
    "Grand Isle": ["Alburgh", "Grand Isle", "Isle La Motte", "North Hero", "South Hero"],
    "Lamoille": ["Belvidere", "Cambridge", "Eden", "Elmore", "Hyde Park", "Johnson", "Morristown", "Stowe", "Waterville", "Wolcott"],
    "Orange": ["Bradford", "Braintree", "Brookfield", "Chelsea", "Corinth", "Fairlee", "Newbury", "Orange", "Randolph", "Strafford", "Thetford", "Topsham", "Tunbridge", "Vershire", "Washington", "West Fairlee", "Williamstown"],
    "Orleans": ["Albany", "Barton", "Brownington", "Charleston", "Coventry", "Craftsbury", "Derby", "Glover", "Greensboro", "Holland", "Irasburg", "Jay", "Lowell", "Morgan", "Newport", "Troy", "Westfield", "Westmore"],
    "Rutland": ["Benson", "Brandon", "Castleton", "Chittenden", "Clarendon", "Danby", "Fair Haven", "Hubbardton", "Ira", "Mendon", "Middletown Springs", "Mount Holly", "Mount Tabor", "Pawlet", "Pittsfield", "Pittsford", "Poultney", "Proctor", "Rutland", "Shrewsbury", "Sudbury", "Tinmouth", "Wallingford", "Wells", "West Haven", "West Rutland"],
    "Washington": ["Barre", "Berlin", "Cabot", "Calais", "Duxbury", "East Montpelier", "Fayston", "Marshfield", "Middlesex", "Montpelier", "Moretown", "Northfield", "Plainfield", "Roxbury", "Waitsfield", "Warren", "Waterbury", "Woodbury", "Worcester"],
    "Windham": ["Athens", "Brattleboro", "Brookline", "Dover", "Dummerston", "Grafton", "Guilford", "Halifax", "Jamaica", "Londonderry", "Marlboro", "Newfane", "Putney", "Rockingham", "Somerset", "Stratton", "Townshend", "Vernon", "Wardsboro", "Westminster", "Whitingham", "Wilmington", "Windham"],
    "Windsor": ["Andover", "Baltimore", "Barnard", "Bethel", "Bridgewater", "Cavendish", "Chester", "Hartford", "Hartland", "Ludlow", "Norwich", "Plymouth", "Pomfret", "Reading", "Rochester", "Royalton", "Sharon", "Springfield", "Stockbridge", "Weathersfield", "Weston", "West Windsor", "Windsor", "Woodstock"]
}

COUNTY_TOWNS: dict[str, dict[str, list[str]]] = {
    "MA": MA_COUNTY_TOWNS,
    "CT": CT_COUNTY_TOWNS,
    "RI": RI_COUNTY_TOWNS,
    "VT": VT_COUNTY_TOWNS,
}

# States without county tables fall back to a flat city list
CITIES_BY_STATE: dict[str, list[str]] = {
    "AZ": ["Chandler", "Gilbert", "Glendale", "Mesa", "Phoenix", "Scottsdale", "Tempe", "Tucson"],
    "CA": ["Fresno", "Long Beach", "Los Angeles", "Oakland", "Sacramento", "San Diego", "San Francisco", "San Jose", "Santa Monica"],
    "CO": ["Aurora", "Boulder", "Colorado Springs", "Denver", "Fort Collins", "Lakewood"],
    "FL": ["Fort Lauderdale", "Jacksonville", "Miami", "Orlando", "St. Petersburg", "Tallahassee", "Tampa"],
    "GA": ["Athens", "Atlanta", "Augusta", "Columbus", "Savannah"],
    "IL": ["Aurora", "Chicago", "Evanston", "Joliet", "Naperville", "Rockford", "Springfield"],
    "ME": ["Auburn", "Augusta", "Bangor", "Biddeford", "Lewiston", "Portland", "Saco", "South Portland"],
    "MI": ["Ann Arbor", "Detroit", "Grand Rapids", "Lansing", "Warren"],
    "MN": ["Bloomington", "Duluth", "Minneapolis", "Rochester", "St. Paul"],
    "NC": ["Charlotte", "Durham", "Greensboro", "Raleigh", "Wilmington"],
    "NH": ["Concord", "Dover", "Manchester", "Nashua", "Portsmouth", "Rochester", "Salem"],
    "NV": ["Henderson", "Las Vegas", "North Las Vegas", "Reno", "Sparks"],
    "NY": ["Albany", "Buffalo", "New York", "Rochester", "Syracuse", "Yonkers"],
    "OR": ["Beaverton", "Bend", "Eugene", "Gresham", "Portland", "Salem"],
    "PA": ["Allentown", "Erie", "Philadelphia", "Pittsburgh", "Reading", "Scranton"],
    "TN": ["Chattanooga", "Knoxville", "Memphis", "Murfreesboro", "Nashville"],
    "TX": ["Arlington", "Austin", "Dallas", "El Paso", "Fort Worth", "Houston", "Plano", "San Antonio"],
    "WA": ["Bellevue", "Everett", "Seattle", "Spokane", "Tacoma", "Vancouver"],
}

# Neighborhoods/areas by (state, town)
SUB_AREAS: dict[tuple[str, str], list[str]] = {
    # Massachusetts
    ("MA", "Boston"): ["Aberdeen", "Allston", "Back Bay", "Bay Village", "Beacon Hill", "Brighton", "Brighton's Chestnut Hill", "Charlestown", "Chinatown", "Dorchester", "Downtown", "East Boston", "Fenway", "Hyde Park", "Jamaica Plain", "Mattapan", "Mission Hill", "North End", "Roslindale", "Roxbury", "South Boston", "South End", "West End", "West Roxbury"],
    ("MA", "Worcester"): ["Burncoat", "Cherry Valley", "Crown Hill", "Downtown", "East Side", "Greendale", "Main South", "Tatnuck", "University Park", "Vernon Hill", "West Side"],
    ("MA", "Springfield"): ["Bay", "Boston Road", "Brightwood", "Downtown", "East Forest Park", "Forest Park", "Liberty Heights", "McKnight", "Memorial Square", "Metro Center", "North End", "Old Hill", "Pine Point", "Sixteen Acres", "South End"],

    # California
    ("CA", "Los Angeles"): ["Arleta", "Bel Air", "Beverly Crest", "Beverly Grove", "Boyle Heights", "Brentwood", "Century City", "Chatsworth", "Chinatown", "Crenshaw", "Downtown", "Eagle Rock", "Echo Park", "El Sereno", "Encino", "Hollywood", "Hyde Park", "Koreatown", "Leimert Park", "Los Feliz", "Mid-City", "Mid-Wilshire", "Pacific Palisades", "Palms", "San Pedro", "Santa Monica", "Sherman Oaks", "Silver Lake", "South Central", "Studio City", "Sun Valley", "Sylmar", "Toluca Lake", "Van Nuys", "Venice", "West Adams", "West Hills", "West Hollywood", "Westlake", "Westwood", "Wilmington", "Windsor Square"],
    ("CA", "San Diego"): ["Balboa Park", "Bankers Hill", "Bay Ho", "Bay Park", "Carmel Valley", "City Heights", "Clairemont", "College Area", "Del Mar Heights", "Downtown", "East Village", "Gaslamp Quarter", "Golden Hill", "Kearny Mesa", "La Jolla", "Linda Vista", "Little Italy", "Mira Mesa", "Mission Bay", "Mission Beach", "Mission Hills", "Mission Valley", "North Park", "Ocean Beach", "Pacific Beach", "Point Loma", "Rancho Bernardo", "Rancho Penasquitos", "Scripps Ranch", "Sorrento Valley", "Tierrasanta", "University City", "University Heights"],
    ("CA", "San Francisco"): ["Bayview", "Bernal Heights", "Castro", "Chinatown", "Civic Center", "Cole Valley", "Dogpatch", "Downtown", "Embarcadero", "Excelsior", "Financial District", "Fisherman's Wharf", "Glen Park", "Haight-Ashbury", "Hayes Valley", "Inner Richmond", "Inner Sunset", "Japantown", "Lower Haight", "Marina", "Mission", "Nob Hill", "Noe Valley", "North Beach", "Outer Richmond", "Outer Sunset", "Pacific Heights", "Polk Gulch", "Potrero Hill", "Presidio", "Richmond", "Russian Hill", "SOMA", "Sunset", "Tenderloin", "Twin Peaks", "Union Square", "Western Addition"],

    # New York
    ("NY", "New York"): ["Battery Park City", "Chelsea", "Chinatown", "East Harlem", "East Village", "Financial District", "Flatiron", "Gramercy", "Greenwich Village", "Harlem", "Hell's Kitchen", "Hudson Yards", "Inwood", "Kips Bay", "Little Italy", "Lower East Side", "Midtown", "Morningside Heights", "Murray Hill", "NoHo", "NoMad", "SoHo", "Stuyvesant Town", "Tribeca", "Tudor City", "Two Bridges", "Upper East Side", "Upper West Side", "Washington Heights", "West Village"],

    # Illinois
    ("IL", "Chicago"): ["Albany Park", "Andersonville", "Armour Square", "Ashburn", "Auburn Gresham", "Austin", "Avondale", "Back of the Yards", "Belmont Cragin", "Beverly", "Bridgeport", "Brighton Park", "Bucktown", "Calumet Heights", "Chatham", "Chinatown", "Clearing", "Edgewater", "Englewood", "Forest Glen", "Garfield Park", "Gold Coast", "Grand Boulevard", "Hegewisch", "Hermosa", "Humboldt Park", "Hyde Park", "Irving Park", "Jefferson Park", "Kenwood", "Lakeview", "Lincoln Park", "Lincoln Square", "Logan Square", "Loop", "McKinley Park", "Montclare", "Mount Greenwood", "Near North Side", "Near South Side", "North Center", "Norwood Park", "Pilsen", "Portage Park", "Pullman", "Ravenswood", "River North", "Riverdale", "Rogers Park", "Roseland", "South Chicago", "South Shore", "Streeterville", "Uptown", "West Elsdon", "West Englewood", "West Lawn", "West Loop", "West Ridge", "West Town", "Wicker Park", "Woodlawn"],

    # Texas
    ("TX", "Houston"): ["Addicks", "Alief", "Bellaire", "Braeswood", "Clear Lake", "Cottage Grove", "Downtown", "East End", "Fifth Ward", "Fourth Ward", "Galleria", "Greater Heights", "Greenway", "Gulfton", "Heights", "Hobby Area", "Houston Heights", "Independence Heights", "Kashmere Gardens", "Kingwood", "Magnolia Park", "Midtown", "Montrose", "Neartown", "Rice Village", "River Oaks", "Second Ward", "Sharpstown", "Southampton", "Third Ward", "Upper Kirby", "Washington Avenue", "West University", "Westchase"],
    ("TX", "Dallas"): ["Arts District", "Bishop Arts District", "Cityplace", "Deep Ellum", "Design District", "Downtown", "East Dallas", "Fair Park", "Highland Park", "Knox-Henderson", "Lake Highlands", "Lakewood", "Lower Greenville", "North Dallas", "Oak Cliff", "Oak Lawn", "Old East Dallas", "Park Cities", "Preston Hollow", "South Dallas", "Uptown", "Victory Park", "West Dallas", "White Rock Lake"],
    ("TX", "Austin"): ["Barton Hills", "Bouldin Creek", "Brentwood", "Central Austin", "Clarksville", "Crestview", "Downtown", "East Austin", "Hyde Park", "Mueller", "North Loop", "Rosedale", "South Congress", "South Lamar", "Tarrytown", "Travis Heights", "West Campus", "Zilker"],

    # Florida
    ("FL", "Miami"): ["Allapattah", "Brickell", "Coconut Grove", "Coral Way", "Design District", "Downtown", "Edgewater", "Flagami", "Little Havana", "Little Haiti", "Midtown", "Model City", "Overtown", "Upper Eastside", "Wynwood"],

    # Georgia
    ("GA", "Atlanta"): ["Ansley Park", "Buckhead", "Candler Park", "Castleberry Hill", "Decatur", "Downtown", "Druid Hills", "East Atlanta", "Grant Park", "Inman Park", "Little Five Points", "Midtown", "Old Fourth Ward", "Poncey-Highland", "Sweet Auburn", "Virginia Highland", "West End", "Westview"],

    # Washington
    ("WA", "Seattle"): ["Ballard", "Beacon Hill", "Capitol Hill", "Central District", "Columbia City", "Downtown", "Eastlake", "Fremont", "Georgetown", "Green Lake", "Greenwood", "Madison Park", "Magnolia", "Madrona", "Pike Place Market", "Pioneer Square", "Queen Anne", "Ravenna", "South Lake Union", "University District", "Wallingford", "West Seattle"],

    # Colorado
    ("CO", "Denver"): ["Capitol Hill", "Cherry Creek", "City Park", "Downtown", "Five Points", "Globeville", "Highland", "LoDo", "Park Hill", "RiNo", "Stapleton", "Union Station", "Uptown", "Washington Park"],

    # Pennsylvania
    ("PA", "Philadelphia"): ["Bella Vista", "Center City", "Chestnut Hill", "Chinatown", "East Falls", "Fairmount", "Fishtown", "Germantown", "Graduate Hospital", "Kensington", "Logan Square", "Manayunk", "Northern Liberties", "Old City", "Passyunk Square", "Port Richmond", "Queen Village", "Rittenhouse Square", "Society Hill", "South Philadelphia", "South Street", "University City", "Washington Square West"],

    # Arizona
    ("AZ", "Phoenix"): ["Ahwatukee", "Arcadia", "Biltmore", "Central Phoenix", "Desert Ridge", "Downtown", "Encanto", "Maryvale", "Midtown", "Moon Valley", "North Mountain", "Paradise Valley", "South Mountain", "Sunnyslope"],

    # Michigan
    ("MI", "Detroit"): ["Corktown", "Downtown", "Eastern Market", "Greektown", "Midtown", "New Center", "Palmer Woods", "Riverfront", "Rosedale Park", "Southwest Detroit", "West Village"],

    # Oregon
    ("OR", "Portland"): ["Alberta Arts", "Buckman", "Downtown", "Eastmoreland", "Goose Hollow", "Hawthorne", "Irvington", "Laurelhurst", "Lloyd District", "Mississippi", "Mt. Tabor", "Nob Hill", "Pearl District", "Richmond", "Sellwood", "St. Johns", "West Hills"],

    # Minnesota
    ("MN", "Minneapolis"): ["Downtown", "Linden Hills", "Longfellow", "Lowry Hill", "Lyndale", "Northeast", "North Loop", "Phillips", "Powderhorn", "Seward", "Uptown", "Whittier"],

    # Nevada
    ("NV", "Las Vegas"): ["Arts District", "Centennial Hills", "Downtown", "Green Valley", "Henderson", "North Las Vegas", "Summerlin", "The Strip", "West Las Vegas"],

    # North Carolina
    ("NC", "Charlotte"): ["Dilworth", "Downtown", "Elizabeth", "Myers Park", "NoDa", "Plaza Midwood", "South End", "Uptown"],

    # Tennessee
    ("TN", "Nashville"): ["12 South", "Belle Meade", "Belmont-Hillsboro", "Downtown", "East Nashville", "Germantown", "Green Hills", "Gulch", "Music Row", "Sylvan Park", "The Nations", "West End"],
}
