"""
Mathematics curriculum reference data.

Junior high follows the People's Education Press (人教版) textbooks for
grades 7-9; senior high follows the PEP A edition (必修第一/二册,
选择性必修第一/二/三册). Each section is ``(canonical name, aliases)``.
Canonical names are unique across the whole table and no alias repeats a
name or another alias.
"""

MATH_CURRICULUM_DATA = {
    "七年级上": [
        ("第1章 有理数", [
            ("正数和负数", ("正负数",)),
            ("有理数的概念", ("有理数",)),
            ("数轴", ()),
            ("相反数", ()),
            ("绝对值", ()),
            ("有理数的加减法", ("有理数加减",)),
            ("有理数的乘除法", ("有理数乘除",)),
            ("有理数的乘方", ("乘方",)),
            ("科学记数法", ()),
            ("近似数", ()),
        ]),
        ("第2章 整式的加减", [
            ("单项式", ()),
            ("多项式", ()),
            ("合并同类项", ("同类项",)),
            ("去括号", ()),
            ("整式的加减运算", ("整式加减",)),
        ]),
        ("第3章 一元一次方程", [
            ("一元一次方程", ("方程", "一元一次方程的概念")),
            ("等式的性质", ()),
            ("解一元一次方程", ("移项", "去分母")),
            ("一元一次方程的应用", ("实际问题与一元一次方程",)),
        ]),
        ("第4章 几何图形初步", [
            ("立体图形与平面图形", ("几何图形",)),
            ("直线、射线、线段", ("线段",)),
            ("角的度量", ("角",)),
            ("余角和补角", ("余角", "补角")),
        ]),
    ],
    "七年级下": [
        ("第5章 相交线与平行线", [
            ("相交线", ("对顶角", "邻补角")),
            ("垂线", ("垂直",)),
            ("平行线的判定", ()),
            ("平行线的性质", ()),
            ("平移", ()),
        ]),
        ("第6章 实数", [
            ("平方根", ("算术平方根",)),
            ("立方根", ()),
            ("实数", ("无理数",)),
        ]),
        ("第7章 平面直角坐标系", [
            ("平面直角坐标系", ("坐标系", "直角坐标系")),
            ("坐标方法的简单应用", ()),
        ]),
        ("第8章 二元一次方程组", [
            ("二元一次方程组", ("二元一次方程", "方程组")),
            ("消元法", ("代入消元法", "加减消元法")),
            ("二元一次方程组的应用", ("实际问题与二元一次方程组",)),
            ("三元一次方程组", ()),
        ]),
        ("第9章 不等式与不等式组", [
            ("不等式的性质", ("不等式",)),
            ("一元一次不等式", ()),
            ("一元一次不等式组", ("不等式组",)),
        ]),
        ("第10章 数据的收集、整理与描述", [
            ("统计调查", ("全面调查", "抽样调查")),
            ("直方图", ("频数分布直方图",)),
        ]),
    ],
    "八年级上": [
        ("第11章 三角形", [
            ("三角形的边", ("三边关系",)),
            ("三角形的高、中线与角平分线", ("三角形的高", "三角形的中线")),
            ("三角形的内角和", ("内角和", "三角形内角和")),
            ("多边形及其内角和", ("多边形", "多边形内角和")),
        ]),
        ("第12章 全等三角形", [
            ("全等三角形", ("全等",)),
            ("三角形全等的判定", ("SSS", "SAS", "ASA", "AAS", "HL")),
            ("角的平分线的性质", ("角平分线",)),
        ]),
        ("第13章 轴对称", [
            ("轴对称", ("轴对称图形",)),
            ("线段的垂直平分线", ("垂直平分线", "中垂线")),
            ("等腰三角形", ()),
            ("等边三角形", ()),
            ("最短路径问题", ("将军饮马",)),
        ]),
        ("第14章 整式的乘法与因式分解", [
            ("整式的乘法", ("幂的运算", "单项式乘多项式")),
            ("乘法公式", ("平方差公式", "完全平方公式")),
            ("因式分解", ("分解因式", "提公因式法")),
        ]),
        ("第15章 分式", [
            ("分式的概念", ("分式",)),
            ("分式的运算", ("分式运算",)),
            ("分式方程", ()),
        ]),
    ],
    "八年级下": [
        ("第16章 二次根式", [
            ("二次根式", ("根式", "最简二次根式")),
            ("二次根式的运算", ("二次根式的乘除", "二次根式的加减")),
        ]),
        ("第17章 勾股定理", [
            ("勾股定理", ("毕达哥拉斯定理",)),
            ("勾股定理的逆定理", ()),
        ]),
        ("第18章 平行四边形", [
            ("平行四边形的性质", ("平行四边形",)),
            ("平行四边形的判定", ()),
            ("三角形中位线", ("中位线",)),
            ("矩形", ()),
            ("菱形", ()),
            ("正方形", ()),
        ]),
        ("第19章 一次函数", [
            ("函数的概念", ("函数", "自变量")),
            ("正比例函数", ()),
            ("一次函数", ("一次函数的图像",)),
            ("一次函数与方程、不等式", ()),
        ]),
        ("第20章 数据的分析", [
            ("平均数", ("加权平均数",)),
            ("中位数和众数", ("中位数", "众数")),
            ("方差", ("数据的波动程度",)),
        ]),
    ],
    "九年级上": [
        ("第21章 一元二次方程", [
            ("一元二次方程", ("二次方程",)),
            ("配方法", ()),
            ("公式法", ("求根公式",)),
            ("因式分解法", ()),
            ("根的判别式", ("判别式",)),
            ("根与系数的关系", ("韦达定理",)),
            ("一元二次方程的应用", ("实际问题与一元二次方程",)),
        ]),
        ("第22章 二次函数", [
            ("二次函数", ("抛物线",)),
            ("二次函数的图像和性质", ("二次函数图像",)),
            ("二次函数与一元二次方程", ()),
            ("二次函数的应用", ("实际问题与二次函数",)),
        ]),
        ("第23章 旋转", [
            ("图形的旋转", ("旋转",)),
            ("中心对称", ("中心对称图形",)),
        ]),
        ("第24章 圆", [
            ("圆的有关性质", ("圆", "垂径定理", "圆周角")),
            ("点和圆、直线和圆的位置关系", ("切线", "直线与圆的位置关系")),
            ("正多边形和圆", ()),
            ("弧长和扇形面积", ("弧长", "扇形面积")),
        ]),
        ("第25章 概率初步", [
            ("随机事件", ("必然事件", "不可能事件")),
            ("概率的意义", ("概率",)),
            ("用列举法求概率", ("树状图", "列表法")),
            ("用频率估计概率", ()),
        ]),
    ],
    "九年级下": [
        ("第26章 反比例函数", [
            ("反比例函数", ("反比例函数的图像",)),
            ("反比例函数的应用", ()),
        ]),
        ("第27章 相似", [
            ("相似三角形", ("相似", "相似三角形的判定")),
            ("位似", ("位似图形",)),
        ]),
        ("第28章 锐角三角函数", [
            ("锐角三角函数", ("正弦", "余弦", "正切")),
            ("解直角三角形", ("解直角三角形及其应用",)),
        ]),
        ("第29章 投影与视图", [
            ("投影", ("平行投影", "中心投影")),
            ("三视图", ()),
        ]),
    ],
    "高一上": [
        ("第1章 集合与常用逻辑用语", [
            ("集合的概念", ("集合", "元素与集合")),
            ("集合间的基本关系", ("子集", "真子集")),
            ("集合的基本运算", ("交集", "并集", "补集")),
            ("充分条件与必要条件", ("充要条件", "充分必要条件")),
            ("全称量词与存在量词", ("量词",)),
        ]),
        ("第2章 一元二次函数、方程和不等式", [
            ("等式性质与不等式性质", ()),
            ("基本不等式", ("均值不等式",)),
            ("一元二次不等式", ("二次不等式",)),
        ]),
        ("第3章 函数的概念与性质", [
            ("函数的概念及其表示", ("定义域", "值域", "分段函数")),
            ("函数的单调性", ("单调性",)),
            ("函数的奇偶性", ("奇偶性", "奇函数", "偶函数")),
            ("幂函数", ()),
        ]),
        ("第4章 指数函数与对数函数", [
            ("指数与指数函数", ("指数函数", "指数幂")),
            ("对数与对数函数", ("对数", "对数函数")),
            ("函数的零点", ("零点", "二分法")),
            ("函数模型的应用", ()),
        ]),
        ("第5章 三角函数", [
            ("任意角和弧度制", ("任意角", "弧度制")),
            ("三角函数的概念", ("三角函数", "三角函数定义")),
            ("诱导公式", ()),
            ("三角函数的图像与性质", ("正弦函数", "余弦函数", "正切函数")),
            ("三角恒等变换", ("两角和与差", "二倍角公式")),
        ]),
    ],
    "高一下": [
        ("第6章 平面向量及其应用", [
            ("平面向量的概念", ("向量", "平面向量")),
            ("平面向量的运算", ("向量运算", "数量积")),
            ("平面向量基本定理及坐标表示", ("向量坐标",)),
            ("正弦定理", ()),
            ("余弦定理", ()),
        ]),
        ("第7章 复数", [
            ("复数的概念", ("复数", "虚数")),
            ("复数的四则运算", ("复数运算",)),
        ]),
        ("第8章 立体几何初步", [
            ("基本立体图形", ("棱柱", "棱锥", "旋转体")),
            ("表面积与体积", ("表面积", "体积")),
            ("空间点、直线、平面之间的位置关系", ()),
            ("直线与平面的平行", ("线面平行",)),
            ("平面与平面的平行", ("面面平行",)),
            ("直线与平面的垂直", ("线面垂直",)),
            ("平面与平面的垂直", ("面面垂直",)),
        ]),
        ("第9章 统计", [
            ("随机抽样", ("简单随机抽样", "分层抽样")),
            ("用样本估计总体", ("百分位数", "频率分布直方图")),
        ]),
        ("第10章 概率", [
            ("随机事件与概率", ("古典概型", "样本空间")),
            ("事件的相互独立性", ("相互独立事件",)),
            ("频率与概率", ()),
        ]),
    ],
    "高二上": [
        ("第1章 空间向量与立体几何", [
            ("空间向量及其运算", ("空间向量",)),
            ("空间向量的应用", ("法向量", "二面角")),
        ]),
        ("第2章 直线和圆的方程", [
            ("直线的倾斜角与斜率", ("倾斜角", "斜率")),
            ("直线的方程", ("直线方程", "点斜式", "斜截式")),
            ("圆的方程", ("圆的标准方程", "圆的一般方程")),
            ("直线与圆、圆与圆的位置关系", ("圆与圆的位置关系",)),
        ]),
        ("第3章 圆锥曲线的方程", [
            ("椭圆", ("椭圆的标准方程", "离心率")),
            ("双曲线", ("渐近线",)),
            ("抛物线的方程", ("抛物线的标准方程", "焦点弦")),
            ("圆锥曲线的综合", ("圆锥曲线",)),
        ]),
    ],
    "高二下": [
        ("第4章 数列", [
            ("数列的概念", ("数列", "通项公式")),
            ("等差数列", ("等差数列求和",)),
            ("等比数列", ("等比数列求和",)),
            ("数学归纳法", ()),
        ]),
        ("第5章 一元函数的导数及其应用", [
            ("导数的概念及其意义", ("导数", "切线斜率")),
            ("导数的运算", ("求导", "复合函数求导")),
            ("导数在研究函数中的应用", ("极值", "最值", "导数与单调性")),
        ]),
    ],
    "高三上": [
        ("第6章 计数原理", [
            ("分类加法计数原理与分步乘法计数原理", ("加法原理", "乘法原理")),
            ("排列与组合", ("排列", "组合")),
            ("二项式定理", ("二项展开式",)),
        ]),
        ("第7章 随机变量及其分布", [
            ("条件概率与全概率公式", ("条件概率", "全概率公式")),
            ("离散型随机变量及其分布列", ("分布列", "期望", "数学期望")),
            ("二项分布与超几何分布", ("二项分布", "超几何分布")),
            ("正态分布", ()),
        ]),
        ("第8章 成对数据的统计分析", [
            ("成对数据的相关关系", ("相关系数",)),
            ("一元线性回归模型", ("线性回归", "回归方程")),
            ("列联表与独立性检验", ("独立性检验", "卡方检验")),
        ]),
    ],
}
