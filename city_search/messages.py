"""Display strings shown on the page."""

TITLE = "CITY SEARCH"
SUBTITLE = "Tra cứu thành phố theo tên hoặc tọa độ"
SEARCH_LABEL = "Tìm kiếm theo tên thành phố"
SEARCH_PLACEHOLDER = "Nhập tên thành phố ..."
COORDINATES_LABEL = "Hoặc tìm theo tọa độ"
LATITUDE_PLACEHOLDER = "Latitude ..."
LONGITUDE_PLACEHOLDER = "Longitude ..."
SEARCH_BUTTON = "Search"
LOADING = "Đang tìm..."
NO_RESULT = "Không tìm thấy kết quả!"
INVALID_COORDINATES = "Tọa độ không hợp lệ!"
SERVICE_ERROR = "Không thể kết nối dịch vụ tra cứu, vui lòng thử lại!"
FOOTER = "© City Search | Gradio + Folium"
