# =============================================================================
# lib/seed_data.py - Word and City Lists for Sample Campgrounds
# =============================================================================
# Raw material for core/services/seed_service.py. Titles are built as
# "<descriptor> <place>"; locations and coordinates come from CITIES.
# =============================================================================

DESCRIPTORS = [
    "Forest",
    "Ancient",
    "Petrified",
    "Roaring",
    "Cascade",
    "Tumbling",
    "Silent",
    "Redwood",
    "Bullfrog",
    "Maple",
    "Misty",
    "Elk",
    "Grizzly",
    "Ocean",
    "Sea",
    "Sky",
    "Dusty",
    "Diamond",
]

PLACES = [
    "Flats",
    "Village",
    "Canyon",
    "Pond",
    "Group Camp",
    "Horse Camp",
    "Ghost Town",
    "Camp",
    "Dispersed Camp",
    "Backcountry",
    "River",
    "Creek",
    "Creekside",
    "Bay",
    "Spring",
    "Bayshore",
    "Sands",
    "Mule Camp",
    "Hunting Camp",
    "Cliffs",
    "Hollow",
]

# (city, state, latitude, longitude)
CITIES = [
    ("New York", "New York", 40.7127837, -74.0059413),
    ("Los Angeles", "California", 34.0522342, -118.2436849),
    ("Chicago", "Illinois", 41.8781136, -87.6297982),
    ("Houston", "Texas", 29.7604267, -95.3698028),
    ("Philadelphia", "Pennsylvania", 39.9525839, -75.1652215),
    ("Phoenix", "Arizona", 33.4483771, -112.0740373),
    ("San Antonio", "Texas", 29.4241219, -98.4936282),
    ("San Diego", "California", 32.715738, -117.1610838),
    ("Dallas", "Texas", 32.7766642, -96.7969879),
    ("San Jose", "California", 37.3382082, -121.8863286),
    ("Austin", "Texas", 30.267153, -97.7430608),
    ("Indianapolis", "Indiana", 39.768403, -86.158068),
    ("Jacksonville", "Florida", 30.3321838, -81.655651),
    ("San Francisco", "California", 37.7749295, -122.4194155),
    ("Columbus", "Ohio", 39.9611755, -82.9987942),
    ("Charlotte", "North Carolina", 35.2270869, -80.8431267),
    ("Fort Worth", "Texas", 32.7554883, -97.3307658),
    ("Detroit", "Michigan", 42.331427, -83.0457538),
    ("El Paso", "Texas", 31.7775757, -106.4424559),
    ("Memphis", "Tennessee", 35.1495343, -90.0489801),
    ("Seattle", "Washington", 47.6062095, -122.3320708),
    ("Denver", "Colorado", 39.7392358, -104.990251),
    ("Washington", "District of Columbia", 38.9071923, -77.0368707),
    ("Boston", "Massachusetts", 42.3600825, -71.0588801),
    ("Nashville", "Tennessee", 36.1626638, -86.7816016),
    ("Baltimore", "Maryland", 39.2903848, -76.6121893),
    ("Oklahoma City", "Oklahoma", 35.4675602, -97.5164276),
    ("Louisville", "Kentucky", 38.2526647, -85.7584557),
    ("Portland", "Oregon", 45.5230622, -122.6764816),
    ("Las Vegas", "Nevada", 36.1699412, -115.1398296),
    ("Milwaukee", "Wisconsin", 43.0389025, -87.9064736),
    ("Albuquerque", "New Mexico", 35.0853336, -106.6055534),
    ("Tucson", "Arizona", 32.2217429, -110.926479),
    ("Fresno", "California", 36.7468422, -119.7725868),
    ("Sacramento", "California", 38.5815719, -121.4943996),
    ("Kansas City", "Missouri", 39.0997265, -94.5785667),
    ("Atlanta", "Georgia", 33.7489954, -84.3879824),
    ("Omaha", "Nebraska", 41.2523634, -95.9979883),
    ("Colorado Springs", "Colorado", 38.8338816, -104.8213634),
    ("Raleigh", "North Carolina", 35.7795897, -78.6381787),
    ("Miami", "Florida", 25.7616798, -80.1917902),
    ("Minneapolis", "Minnesota", 44.977753, -93.2650108),
    ("Tulsa", "Oklahoma", 36.1539816, -95.992775),
    ("Cleveland", "Ohio", 41.49932, -81.6943605),
    ("Wichita", "Kansas", 37.688889, -97.336111),
    ("New Orleans", "Louisiana", 29.9510658, -90.0715323),
    ("Tampa", "Florida", 27.950575, -82.4571776),
    ("Honolulu", "Hawaii", 21.3069444, -157.8583333),
    ("Anchorage", "Alaska", 61.2180556, -149.9002778),
    ("Salt Lake City", "Utah", 40.7607793, -111.8910474),
    ("Boise", "Idaho", 43.6187102, -116.2146068),
    ("Spokane", "Washington", 47.6587802, -117.4260466),
    ("Reno", "Nevada", 39.5296329, -119.8138027),
    ("Madison", "Wisconsin", 43.0730517, -89.4012302),
    ("Des Moines", "Iowa", 41.6005448, -93.6091064),
    ("Knoxville", "Tennessee", 35.9606384, -83.9207392),
    ("Asheville", "North Carolina", 35.5950581, -82.5514869),
    ("Flagstaff", "Arizona", 35.1982836, -111.651302),
    ("Bozeman", "Montana", 45.6769979, -111.0429339),
    ("Missoula", "Montana", 46.8721284, -113.9940314),
    ("Bend", "Oregon", 44.0581728, -121.3153096),
    ("Burlington", "Vermont", 44.4758825, -73.212072),
    ("Portland", "Maine", 43.6590993, -70.2568189),
    ("Duluth", "Minnesota", 46.7866719, -92.1004852),
    ("Santa Fe", "New Mexico", 35.6869752, -105.937799),
    ("Rapid City", "South Dakota", 44.0805434, -103.2310149),
    ("Cheyenne", "Wyoming", 41.1399814, -104.8202462),
    ("Fairbanks", "Alaska", 64.8377778, -147.7163889),
]
