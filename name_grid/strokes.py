"""Словарь черт иероглифов (康熙筆劃) для расчета пяти решеток"""
from typing import Dict

# Упрощенные формы приведены к числу черт традиционного написания,
# ключи радикалов считаются по полной форме (氵=水4, 艹=艸6, 阝=阜8/邑7).
KANGXI_STROKES: Dict[str, int] = {
    # Фамилии
    '丁': 2, '于': 3, '方': 4, '王': 4, '尹': 4, '孔': 4, '毛': 4,
    '田': 5, '石': 5, '白': 5, '史': 5, '任': 6, '朱': 6, '向': 6,
    '李': 7, '吳': 7, '吴': 7, '何': 7, '宋': 7, '余': 7, '杜': 7,
    '呂': 7, '吕': 7, '江': 7, '周': 8, '林': 8, '沈': 8, '汪': 8,
    '孟': 8, '武': 8, '姚': 9, '姜': 9, '韋': 9, '韦': 9, '段': 9,
    '侯': 9, '柯': 9, '施': 9, '徐': 10, '孫': 10, '孙': 10, '馬': 10,
    '马': 10, '高': 10, '唐': 10, '袁': 10, '夏': 10, '秦': 10, '洪': 10,
    '張': 11, '张': 11, '胡': 11, '梁': 11, '許': 11, '许': 11, '曹': 11,
    '崔': 11, '黃': 12, '黄': 12, '馮': 12, '冯': 12, '彭': 12, '曾': 12,
    '程': 12, '邱': 12, '賀': 12, '贺': 12, '邵': 12, '傅': 12, '楊': 13,
    '杨': 13, '賈': 13, '贾': 13, '雷': 13, '湯': 13, '汤': 13, '游': 13,
    '詹': 13, '趙': 14, '赵': 14, '廖': 14, '熊': 14, '郝': 14, '溫': 14,
    '温': 14, '劉': 15, '刘': 15, '郭': 15, '董': 15, '葉': 15, '叶': 15,
    '黎': 15, '萬': 15, '万': 15, '歐': 15, '欧': 15, '陳': 16, '陈': 16,
    '潘': 16, '盧': 16, '卢': 16, '陸': 16, '陆': 16, '閻': 16, '阎': 16,
    '龍': 16, '龙': 16, '陶': 16, '錢': 16, '钱': 16, '賴': 16, '赖': 16,
    '謝': 17, '谢': 17, '韓': 17, '韩': 17, '蔡': 17, '蔣': 17, '蒋': 17,
    '鍾': 17, '钟': 17, '鄒': 17, '邹': 17, '魏': 18, '戴': 18, '簡': 18,
    '简': 18, '顏': 18, '颜': 18, '鄭': 19, '郑': 19, '鄧': 19, '邓': 19,
    '蕭': 19, '萧': 19, '譚': 19, '谭': 19, '薛': 19, '羅': 20, '罗': 20,
    '嚴': 20, '严': 20, '顧': 21, '顾': 21, '蘇': 22, '苏': 22, '龔': 22,
    '龚': 22,

    # Имена
    '一': 1, '小': 3, '大': 3, '子': 3, '月': 4, '中': 4, '天': 4,
    '心': 4, '文': 4, '仁': 4, '冬': 5, '北': 5, '平': 5, '永': 5,
    '功': 5, '立': 5, '正': 5, '可': 5, '以': 5, '玉': 5, '安': 6,
    '宇': 6, '光': 6, '吉': 6, '西': 6, '志': 7, '宏': 7, '成': 7,
    '秀': 7, '利': 7, '孝': 7, '廷': 7, '彤': 7, '明': 8, '欣': 8,
    '佳': 8, '昌': 8, '旺': 8, '和': 8, '忠': 8, '宗': 8, '東': 8,
    '东': 8, '金': 8, '宜': 8, '承': 8, '沛': 8, '昊': 8, '建': 9,
    '軍': 9, '军': 9, '俊': 9, '怡': 9, '美': 9, '紅': 9, '红': 9,
    '春': 9, '秋': 9, '思': 9, '波': 9, '飛': 9, '飞': 9, '亮': 9,
    '勇': 9, '信': 9, '南': 9, '品': 9, '家': 10, '玲': 10, '芳': 10,
    '娟': 10, '洋': 10, '剛': 10, '刚': 10, '峰': 10, '恩': 10, '娜': 10,
    '祖': 10, '桂': 10, '珍': 10, '軒': 10, '轩': 10, '哲': 10, '倩': 10,
    '芸': 10, '益': 10, '庭': 10, '宸': 10, '偉': 11, '伟': 11, '強': 11,
    '强': 11, '國': 11, '国': 11, '敏': 11, '英': 11, '梅': 11, '雪': 11,
    '晨': 11, '浩': 11, '海': 11, '祥': 11, '悅': 11, '悦': 11, '婉': 11,
    '振': 11, '婕': 11, '梓': 11, '雅': 12, '婷': 12, '凱': 12, '凯': 12,
    '雄': 12, '森': 12, '盛': 12, '順': 12, '顺': 12, '智': 12, '惠': 12,
    '淑': 12, '雯': 12, '涵': 12, '晴': 12, '清': 12, '博': 12, '紫': 12,
    '茹': 12, '翔': 12, '傑': 12, '琳': 13, '義': 13, '义': 13, '愛': 13,
    '爱': 13, '琪': 13, '詩': 13, '诗': 13, '新': 13, '楠': 13, '聖': 13,
    '圣': 13, '裕': 13, '華': 14, '华': 14, '嘉': 14, '鳳': 14, '凤': 14,
    '豪': 14, '榮': 14, '荣': 14, '福': 14, '瑞': 14, '誠': 14, '诚': 14,
    '語': 14, '语': 14, '銀': 14, '银': 14, '睿': 14, '菲': 14, '毓': 14,
    '毅': 15, '德': 15, '慧': 15, '瑩': 15, '莹': 15, '輝': 15, '辉': 15,
    '樂': 15, '乐': 15, '萱': 15, '瑤': 15, '瑶': 15, '磊': 15, '賢': 15,
    '贤': 15, '逸': 15, '震': 15, '靜': 16, '静': 16, '達': 16, '达': 16,
    '興': 16, '兴': 16, '諾': 16, '诺': 16, '穎': 16, '颖': 16, '曉': 16,
    '晓': 16, '蓉': 16, '霞': 17, '陽': 17, '阳': 17, '澤': 17, '泽': 17,
    '濤': 18, '涛': 18, '禮': 18, '礼': 18, '麗': 19, '丽': 19, '鵬': 19,
    '鹏': 19, '蕾': 19, '寶': 20, '宝': 20, '蘭': 23, '兰': 23, '鑫': 24,
}
