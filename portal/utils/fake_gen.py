from faker import Faker
from faker.providers import BaseProvider


class PortalProvider(BaseProvider):
    """
    Sinh dữ liệu mẫu cho cổng thông tin quy hoạch
    Tiêu đề tin, dự án, bản vẽ mang văn phong hành chính
    """

    news_prefixes = [
        'Hội nghị', 'Công bố', 'Triển khai', 'Phê duyệt', 'Lấy ý kiến về',
        'Tổng kết', 'Hướng dẫn thực hiện', 'Thẩm định', 'Điều chỉnh'
    ]

    plan_subjects = [
        'quy hoạch tổng thể quốc gia', 'quy hoạch vùng Đồng bằng sông Hồng',
        'quy hoạch vùng Đồng bằng sông Cửu Long', 'quy hoạch sử dụng đất',
        'quy hoạch không gian biển', 'quy hoạch hạ tầng giao thông',
        'quy hoạch mạng lưới đô thị', 'quy hoạch tỉnh', 'quy hoạch năng lượng'
    ]

    periods = ['thời kỳ 2021-2030', 'tầm nhìn đến năm 2050', 'giai đoạn 2026-2030']

    drawing_kinds = [
        'Mặt bằng tổng thể', 'Sơ đồ định hướng phát triển', 'Bản đồ hiện trạng',
        'Sơ đồ hạ tầng kỹ thuật', 'Bản đồ sử dụng đất', 'Mặt cắt điển hình'
    ]

    def news_title(self):
        return f"{self.random_element(self.news_prefixes)} {self.random_element(self.plan_subjects)} " \
               f"{self.random_element(self.periods)}"

    def project_title(self):
        return f"Dự án {self.random_element(self.plan_subjects)} {self.random_element(self.periods)}"

    def drawing_title(self):
        return f"{self.random_element(self.drawing_kinds)} - {self.generator.city()}"

    def youtube_url(self):
        return f"https://www.youtube.com/watch?v={self.generator.pystr(min_chars=11, max_chars=11)}"


# Faker tiếng Việt kèm provider riêng
fake = Faker('vi_VN')
fake.add_provider(PortalProvider)
